"""Ok/Err result values for fallible stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from .constants import FAILURE_KINDS
from .errors import FizzpropError


@dataclass(frozen=True)
class Ok:
    """Successful stage output.

    Attributes:
        value: Transformed integer.
    """

    value: int

    def is_ok(self) -> bool:
        return True

    def and_then(self, stage: Callable[[int], Result]) -> Result:
        """Feed the payload into the next stage.

        Args:
            stage: Fallible transform to run on `value`.

        Returns:
            Whatever `stage` returns.
        """
        return stage(self.value)


@dataclass(frozen=True)
class Err:
    """Failed stage output.

    Attributes:
        kind: Failure tag, `fizz` or `buzz`.
    """

    kind: str

    def __post_init__(self) -> None:
        if self.kind not in FAILURE_KINDS:
            raise FizzpropError(f"validation error: unsupported failure kind: {self.kind}")

    def is_ok(self) -> bool:
        return False

    def and_then(self, stage: Callable[[int], Result]) -> Result:
        """Return this failure unchanged; `stage` is never called."""
        return self


Result = Union[Ok, Err]
