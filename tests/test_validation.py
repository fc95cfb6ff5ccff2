"""Input validation helper tests."""

import pytest

from linesift.utils.validation import clamp_non_negative, validate_non_negative


class TestValidateNonNegative:
    """validate_non_negative accepts 0 and up."""

    @pytest.mark.parametrize("value", [0, 1, 1000])
    def test_accepts(self, value):
        validate_non_negative(value, "after")

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="after must be non-negative"):
            validate_non_negative(-1, "after")

    @pytest.mark.parametrize("value", [True, 1.0, "2", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError, match="after must be an integer"):
            validate_non_negative(value, "after")


class TestClampNonNegative:
    """clamp_non_negative floors at zero."""

    @pytest.mark.parametrize("value,expected", [(-5, 0), (-1, 0), (0, 0), (3, 3)])
    def test_clamp(self, value, expected):
        assert clamp_non_negative(value) == expected
