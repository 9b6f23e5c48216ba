"""
engine/
-------
Trace consumers: replay & recording layer.

    from engine import replay, apply_step, record_run, compare
"""

from engine.replay  import DisplayState, initial_state, apply_step, iter_states, replay, MESSAGE_LOG_LIMIT
from engine.summary import RunSummary, ComparisonResult, record_run, summarize, compare

__all__ = [
    "DisplayState",
    "initial_state",
    "apply_step",
    "iter_states",
    "replay",
    "MESSAGE_LOG_LIMIT",
    "RunSummary",
    "ComparisonResult",
    "record_run",
    "summarize",
    "compare",
]
