"""
Step outcome model.

Each pipeline step returns a StepResult instead of exiting the process,
so the driver decides the exit code once.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Tagged success/failure outcome of one pipeline step."""
    step: str
    ok: bool
    value: Optional[T] = None
    error: str = ""

    @classmethod
    def success(cls, step: str, value: Any = None) -> "StepResult":
        return cls(step=step, ok=True, value=value)

    @classmethod
    def failure(cls, step: str, error: str) -> "StepResult":
        return cls(step=step, ok=False, error=error)
