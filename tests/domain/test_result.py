"""Unit tests for Result and Error."""

import pytest

from commerce.domain.exceptions import GuardError
from commerce.domain.result import Error, Result

SAMPLE = Error("Sample.Broken", "Something broke.")


class TestResult:

    def test_success_without_value(self):
        r = Result.ok()
        assert r.is_success
        assert not r.is_failure
        assert r.value is None
        assert bool(r)

    def test_success_with_value(self):
        assert Result.ok(42).value == 42

    def test_failure_carries_error(self):
        r = Result.fail(SAMPLE)
        assert r.is_failure
        assert r.error == SAMPLE
        assert not bool(r)

    def test_value_of_failure_is_misuse(self):
        with pytest.raises(GuardError):
            Result.fail(SAMPLE).value

    def test_error_of_success_is_misuse(self):
        with pytest.raises(GuardError):
            Result.ok().error

    def test_failure_requires_an_error(self):
        with pytest.raises(GuardError):
            Result.fail("not an error")


class TestError:

    def test_compared_by_value(self):
        assert Error("A.B", "x") == Error("A.B", "x")

    def test_str_includes_code(self):
        assert str(SAMPLE) == "[Sample.Broken] Something broke."
