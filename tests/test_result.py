from __future__ import annotations

import pytest

from fizzprop.errors import FizzpropError
from fizzprop.result import Err, Ok


def test_ok_and_then_calls_stage_with_payload():
    seen = []

    def stage(value):
        seen.append(value)
        return Ok(value * 2)

    assert Ok(4).and_then(stage) == Ok(8)
    assert seen == [4]


def test_err_and_then_skips_stage():
    def stage(value):
        raise AssertionError("stage must not run after a failure")

    failure = Err("fizz")
    assert failure.and_then(stage) is failure


def test_is_ok_distinguishes_variants():
    assert Ok(1).is_ok()
    assert not Err("buzz").is_ok()


def test_err_rejects_unknown_kind():
    with pytest.raises(FizzpropError, match="unsupported failure kind: bang"):
        Err("bang")


def test_results_compare_by_value():
    assert Ok(9) == Ok(9)
    assert Err("fizz") == Err("fizz")
    assert Err("fizz") != Err("buzz")
    assert Ok(3) != Err("fizz")
