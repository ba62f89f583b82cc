"""Fizz and buzz stages and the pipeline that chains them."""

from __future__ import annotations

from typing import Callable

from .constants import BUZZ_DIVISOR, BUZZ_STEP, BUZZ_TAG, FIZZ_DIVISOR, FIZZ_STEP, FIZZ_TAG
from .result import Err, Ok, Result

Stage = Callable[[int], Result]


def fizz(number: int) -> Result:
    """Fail on multiples of 3, otherwise add 3."""
    if number % FIZZ_DIVISOR == 0:
        return Err(FIZZ_TAG)
    return Ok(number + FIZZ_STEP)


def buzz(number: int) -> Result:
    """Fail on multiples of 5, otherwise add 5."""
    if number % BUZZ_DIVISOR == 0:
        return Err(BUZZ_TAG)
    return Ok(number + BUZZ_STEP)


STAGES: tuple[Stage, ...] = (fizz, buzz)


def fizzbuzz(number: int) -> Result:
    """Run fizz then buzz, stopping at the first failure.

    Args:
        number: Input integer.

    Returns:
        `Ok(number + 8)`, or the first stage failure. Fizz wins on
        multiples of 15 because buzz never runs.
    """
    fizzed = fizz(number)
    if isinstance(fizzed, Err):
        return fizzed
    return buzz(fizzed.value)


def chain(number: int, *stages: Stage) -> Result:
    """Thread `number` through `stages` in order.

    Args:
        number: Input integer.
        stages: Fallible transforms applied left to right.

    Returns:
        Final result, or the first failure. `Ok(number)` when no stages
        are given.
    """
    result: Result = Ok(number)
    for stage in stages:
        result = result.and_then(stage)
        if not result.is_ok():
            break
    return result
