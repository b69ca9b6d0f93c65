"""Left-to-right function composition with typed stage chaining."""

from .functional import MAX_TYPED_ARITY, compose, flow, foreach, pipe
from .tracing import PipeTrace, StageRecord, make_pipe, traced_pipe

__all__ = [
    "MAX_TYPED_ARITY",
    "pipe",
    "flow",
    "compose",
    "foreach",
    "traced_pipe",
    "make_pipe",
    "PipeTrace",
    "StageRecord",
]
