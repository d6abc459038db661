"""
llm_query — prompt analizy artykułu i integracja z Gemini.

Publiczne API:
  build_analysis_prompt(content, sentences, max_vocab, max_grammar) -> str
  clamp_limits(max_vocab, max_grammar)                            -> (int, int)
  call_gemini(prompt, system_instruction, model, api_key)         -> str
  parse_analysis_response(raw)                                    -> AnalysisResult
  normalize_analysis(data)                                        -> AnalysisResult
  collect_candidates(result)                                      -> list[VocabCandidate]
  analysis_to_dict(result)                                        -> dict
"""

from .prompt import (
    build_analysis_prompt,
    clamp_limits,
    SYSTEM_PROMPT,
    DEFAULT_MAX_VOCAB,
    DEFAULT_MAX_GRAMMAR,
)
from .gemini import call_gemini, DEFAULT_MODEL
from .analysis import (
    AnalysisParseError,
    parse_analysis_response,
    normalize_analysis,
    collect_candidates,
    analysis_to_dict,
)

__all__ = [
    "build_analysis_prompt",
    "clamp_limits",
    "SYSTEM_PROMPT",
    "DEFAULT_MAX_VOCAB",
    "DEFAULT_MAX_GRAMMAR",
    "call_gemini",
    "DEFAULT_MODEL",
    "AnalysisParseError",
    "parse_analysis_response",
    "normalize_analysis",
    "collect_candidates",
    "analysis_to_dict",
]
