"""Unit tests for the digit-sequence representation."""

import dataclasses

import pytest

from longcalc import (
    ONE,
    SIGN_SENTINEL,
    ZERO,
    InvalidInputError,
    Ordering,
    Sign,
    SignedInteger,
    compare,
    from_int,
    from_string,
    is_zero,
    to_int,
    trim,
)


class TestFromString:
    def test_reverses_into_storage_order(self):
        assert from_string("1234") == (4, 3, 2, 1)

    def test_trims_leading_zeros(self):
        assert from_string("000120") == (0, 2, 1)

    def test_all_zeros_is_zero(self):
        assert from_string("0000") == ZERO

    def test_rejects_non_digits(self):
        with pytest.raises(InvalidInputError):
            from_string("12a")

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError):
            from_string("")


class TestConversions:
    def test_from_int(self):
        assert from_int(907) == (7, 0, 9)
        assert from_int(0) == ZERO

    def test_from_int_rejects_negative(self):
        with pytest.raises(InvalidInputError):
            from_int(-1)

    def test_to_int(self):
        assert to_int((7, 0, 9)) == 907
        assert to_int(ZERO) == 0


class TestTrim:
    def test_drops_high_zeros(self):
        assert trim([3, 0, 0]) == (3,)

    def test_keeps_single_zero(self):
        assert trim([0, 0, 0]) == ZERO

    def test_keeps_inner_zeros(self):
        assert trim((0, 0, 1)) == (0, 0, 1)

    def test_is_zero(self):
        assert is_zero(ZERO)
        assert not is_zero(ONE)
        assert not is_zero((0, 1))


class TestCompare:
    """Tests for magnitude ordering."""

    def test_longer_wins(self):
        assert compare(from_string("100"), from_string("99")) is Ordering.GREATER
        assert compare(from_string("99"), from_string("100")) is Ordering.LESS

    def test_first_mismatch_from_the_top_decides(self):
        assert compare(from_string("1299"), from_string("1300")) is Ordering.LESS
        assert compare(from_string("5001"), from_string("5000")) is Ordering.GREATER

    def test_equal(self):
        assert compare(from_string("4567"), from_string("4567")) is Ordering.EQUAL
        assert compare(ZERO, ZERO) is Ordering.EQUAL

    def test_ignores_high_zeros(self):
        assert compare((5, 0, 0), (5,)) is Ordering.EQUAL

    def test_rejects_sentinel(self):
        with pytest.raises(InvalidInputError):
            compare((1, SIGN_SENTINEL), ONE)

    def test_ordering_is_int_like(self):
        assert Ordering.LESS < Ordering.EQUAL < Ordering.GREATER


class TestSignedInteger:
    """Tests for the tagged signed form."""

    def test_defaults_to_positive(self):
        value = SignedInteger((2, 1))
        assert value.sign is Sign.POSITIVE
        assert not value.is_negative

    def test_negative_zero_is_normalised(self):
        assert SignedInteger(ZERO, Sign.NEGATIVE) == SignedInteger(ZERO)

    def test_magnitude_is_canonical(self):
        assert SignedInteger([4, 0, 0]).magnitude == (4,)

    def test_sentinel_round_trip(self):
        value = SignedInteger((9, 9, 9), Sign.NEGATIVE)
        assert value.to_sentinel() == (9, 9, 9, SIGN_SENTINEL)
        assert SignedInteger.from_sentinel((9, 9, 9, SIGN_SENTINEL)) == value

    def test_positive_sentinel_form_is_magnitude(self):
        assert SignedInteger((2, 1)).to_sentinel() == (2, 1)
        assert SignedInteger.from_sentinel([2, 1]) == SignedInteger((2, 1))

    def test_int_and_str(self):
        value = SignedInteger(from_string("1234"), Sign.NEGATIVE)
        assert int(value) == -1234
        assert str(value) == "-1234"
        assert str(SignedInteger(ZERO)) == "0"

    def test_rejects_bad_digits(self):
        with pytest.raises(InvalidInputError):
            SignedInteger((12,))

    def test_is_frozen(self):
        value = SignedInteger(ONE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.sign = Sign.NEGATIVE  # type: ignore
