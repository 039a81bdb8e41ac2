"""Self-correction - turn raw AI output into renderable component records.

This module provides:
- Tolerant JSON extraction from model responses (fences, prose, trailing commas)
- A single-pass validate -> sanitize -> re-validate orchestrator
- Diagnostics for logs and re-prompting (summaries, numbered reports, hints)

Example usage:
    >>> from cosmo.correction import SelfCorrector, format_diagnostic
    >>> outcome = SelfCorrector("context_badge").correct_text('{"id": "b1", "label": "Live",}')
    >>> outcome.state.value, outcome.is_safe
    ('accepted', True)
"""

from .lib import (
    CorrectionOutcome,
    CorrectionState,
    SelfCorrector,
    error_summary,
    format_diagnostic,
    hints,
    is_safe_to_render,
)
from .parse import parse_json_object, repair_json

__all__ = [
    # Orchestrator
    "CorrectionState",
    "CorrectionOutcome",
    "SelfCorrector",
    # Diagnostics
    "is_safe_to_render",
    "error_summary",
    "format_diagnostic",
    "hints",
    # Parsing
    "repair_json",
    "parse_json_object",
]
