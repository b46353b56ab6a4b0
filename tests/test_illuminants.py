import math
import warnings

import pytest

from tint_adaptation import adapt
from tint_errors import ConfigurationError, OutOfRangeError
from tint_illuminants import CustomIlluminant, Illuminant, daylight_xy, planckian_xy


class TestStandardIlluminants:
    def test_d65_white_point(self):
        """Test the tabulated D65 white."""
        assert Illuminant.D65.white_point() == (0.95047, 1.0, 1.08883)

    def test_d50_white_point(self):
        """Test the tabulated D50 white."""
        assert Illuminant.D50.white_point() == (0.96422, 1.0, 0.82521)

    def test_all_normalised_and_positive(self):
        """Test that every standard white has Y = 1 and positive components."""
        for ill in Illuminant:
            x, y, z = ill.white_point()
            assert y == 1.0
            assert x > 0.0 and z > 0.0

    def test_repr(self):
        """Test the enum repr."""
        assert repr(Illuminant.D65) == "Illuminant.D65"


class TestCustomIlluminant:
    def test_daylight_6504_is_close_to_d65(self):
        """Test that the daylight locus at 6504 K reproduces D65."""
        ill = CustomIlluminant.from_cct(6504, daylight=True)
        x, y, z = ill.white_point()
        ref = Illuminant.D65.white_point()
        assert y == 1.0
        assert x == pytest.approx(ref[0], abs=2e-3)
        assert z == pytest.approx(ref[2], abs=2e-3)

    def test_planckian_2856_is_close_to_a(self):
        """Test that a 2856 K black body matches illuminant A chromaticity."""
        x, y = planckian_xy(2856)
        assert x == pytest.approx(0.44757, abs=2e-3)
        assert y == pytest.approx(0.40745, abs=2e-3)

    def test_same_cct_same_illuminant(self):
        """Test value equality and hashing of custom illuminants."""
        a = CustomIlluminant.from_cct(5000)
        b = Illuminant.from_cct(5000)
        assert a == b
        assert hash(a) == hash(b)
        assert a != CustomIlluminant.from_cct(5000, daylight=True)

    def test_from_white_point_normalises(self):
        """Test that an explicit white is scaled to Y = 1."""
        ill = CustomIlluminant.from_white_point((1.9, 2.0, 2.2))
        assert ill.white_point() == pytest.approx((0.95, 1.0, 1.1))
        assert ill.cct is None

    def test_non_positive_white_raises(self):
        """Test that a white point with a zero component is rejected."""
        with pytest.raises(ConfigurationError):
            CustomIlluminant.from_white_point((0.9, 1.0, 0.0))

    def test_negative_cone_response_raises_at_construction(self):
        """Test that a white with a negative Bradford S response is rejected up front."""
        with pytest.raises(ConfigurationError, match="cone response"):
            CustomIlluminant.from_white_point((0.05, 1.0, 0.01))

    def test_valid_custom_white_converts(self):
        """Test that an accepted custom white adapts without error."""
        ill = CustomIlluminant.from_white_point((0.3, 1.0, 0.2))
        out = adapt(ill.white_point(), ill, Illuminant.D65)
        assert out == pytest.approx(Illuminant.D65.white_point(), abs=1e-12)

    @pytest.mark.parametrize("cct", [1000.0, 1666.0, 25001.0, math.nan, math.inf])
    def test_planckian_out_of_range(self, cct):
        """Test that temperatures outside the Planckian domain raise."""
        with pytest.raises(OutOfRangeError):
            CustomIlluminant.from_cct(cct)

    def test_out_of_range_is_value_error(self):
        """Test that the range error is also a ValueError."""
        with pytest.raises(ValueError) as exc:
            CustomIlluminant.from_cct(100.0)
        assert exc.value.lower == 1667.0
        assert exc.value.upper == 25000.0

    def test_daylight_out_of_range(self):
        """Test the lower bound of the daylight locus."""
        with pytest.raises(OutOfRangeError):
            daylight_xy(2000.0)

    def test_low_daylight_cct_warns(self):
        """Test that the daylight locus warns below 4000 K."""
        with pytest.warns(UserWarning, match="4000 K"):
            CustomIlluminant.from_cct(3000, daylight=True)

    def test_daylight_above_4000_is_silent(self):
        """Test that valid daylight temperatures do not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            CustomIlluminant.from_cct(5500, daylight=True)

    def test_deterministic(self):
        """Test that the same temperature always yields the same white."""
        assert planckian_xy(4500.0) == planckian_xy(4500.0)
