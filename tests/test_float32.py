"""Tests for float32 formatting."""

import struct

import pytest

from splicekit.utils.float32 import format_float32, to_float32


def widen(value: float) -> float:
    """Return the double holding the float32 nearest to value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class TestFormatFloat32:
    """Test shortest round-trip formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (120.0, "120"),
            (999.0, "999"),
            (0.0, "0"),
            (0.5, "0.5"),
            (98.4, "98.4"),
            (118.8, "118.8"),
            (240.25, "240.25"),
            (1e10, "10000000000"),
            (1.5e-7, "0.00000015"),
            (-3.0, "-3"),
        ],
    )
    def test_format(self, value, expected):
        """Test widened float32 values print their short form."""
        assert format_float32(widen(value)) == expected

    def test_widened_value_differs_from_literal(self):
        """Test the float32 value is not the double literal."""
        assert widen(98.4) != 98.4
        assert repr(widen(98.4)) != "98.4"

    def test_special_values(self):
        """Test NaN and infinities."""
        assert format_float32(float("nan")) == "NaN"
        assert format_float32(float("inf")) == "+Inf"
        assert format_float32(float("-inf")) == "-Inf"

    def test_round_trips(self):
        """Test formatted text maps back to the same float32."""
        for raw in (b"\x00\x00\xf0\x42", b"\xcd\xcc\xc4\x42", b"\x01\x00\x80\x3f"):
            (value,) = struct.unpack("<f", raw)
            assert to_float32(float(format_float32(value))) == value

    @pytest.mark.parametrize(
        "bits, expected",
        [
            (1820327936, "1237940100000000000000000000"),
            (1795162112, "154742510000000000000000000"),
            (260046848, "0.000000000000000000000000000012621775"),
        ],
    )
    def test_powers_of_two(self, bits, expected):
        """Test values whose shortest form is a neighbour of the nearest decimal."""
        (value,) = struct.unpack(">f", struct.pack(">I", bits))

        assert format_float32(value) == expected
        assert to_float32(float(expected)) == value

    def test_largest_float32(self):
        """Test neighbours beyond the float32 range are skipped."""
        (value,) = struct.unpack(">f", b"\x7f\x7f\xff\xff")

        assert format_float32(value) == "340282350000000000000000000000000000000"

    def test_negative_zero(self):
        """Test the sign of zero is kept."""
        assert format_float32(-0.0) == "-0"
