import math

import pytest

from color_spaces import CIELABColor, CIELCHColor, HSVColor, RGBColor
from tint_colorengine import XYZColor
from tint_colorpoint import (
    BoxGamut,
    Gamut,
    Gradient,
    PointGamut,
    SampledGamut,
    distance,
    gradient,
    mix,
    nearest_in_gamut,
)
from tint_coord import Coord
from tint_errors import OutOfRangeError
from tint_illuminants import Illuminant


class TestMix:
    def test_xyz_midpoint(self):
        """Test the midpoint of two XYZ colors under the same illuminant."""
        a = XYZColor(0.5, 0.25, 0.75)
        b = XYZColor(0.75, 0.5, 0.25)
        assert a.mix(b) == XYZColor(0.625, 0.375, 0.5)

    def test_identical_colors_return_input(self):
        """Test that mixing a color with itself changes nothing."""
        c = RGBColor(0.1, 0.7, 0.3)
        assert c.mix(RGBColor(0.1, 0.7, 0.3), 0.37) is c

    def test_endpoints(self):
        """Test t = 0 and t = 1."""
        a = CIELABColor(20.0, 5.0, -5.0)
        b = CIELABColor(80.0, -5.0, 5.0)
        assert a.mix(b, 0.0) is a
        assert a.mix(b, 1.0) is b

    def test_fraction(self):
        """Test interpolation at t = 0.25."""
        a = RGBColor(0.0, 0.0, 0.0)
        b = RGBColor(1.0, 0.5, 0.25)
        assert a.mix(b, 0.25) == RGBColor(0.25, 0.125, 0.0625)

    @pytest.mark.parametrize("t", [-0.1, 1.5, math.nan, math.inf])
    def test_fraction_out_of_range(self, t):
        """Test that t must lie in [0, 1]."""
        with pytest.raises(OutOfRangeError):
            RGBColor(0, 0, 0).mix(RGBColor(1, 1, 1), t)

    def test_different_types_rejected(self):
        """Test that only same-type colors mix."""
        with pytest.raises(TypeError):
            RGBColor(0, 0, 0).mix(CIELABColor(50, 0, 0))

    def test_xyz_mix_adapts_other(self):
        """Test that XYZ mixing works in the first color's illuminant."""
        a = XYZColor(0.3, 0.3, 0.3, Illuminant.D50)
        b = XYZColor.white_point(Illuminant.D65)
        assert a.mix(b, 1.0) is b
        m = a.mix(b)
        assert m.illuminant is Illuminant.D50
        d50_white = XYZColor.white_point(Illuminant.D50)
        assert m.approx_equal(XYZColor(*((p + q) / 2 for p, q in zip(a.components, d50_white.components))), tol=1e-12)

    def test_lch_mixes_across_hue_zero(self):
        """Test that cylindrical mixing takes the short way round."""
        m = CIELCHColor(50.0, 10.0, 350.0).mix(CIELCHColor(50.0, 10.0, 10.0))
        assert min(m.h, 360.0 - m.h) < 1e-9
        assert m.c == pytest.approx(10.0 * math.cos(math.radians(10.0)))
        assert m.l == pytest.approx(50.0)

    def test_midpoint_and_weighted(self):
        """Test the midpoint helpers."""
        a = RGBColor(0.0, 0.0, 0.0)
        b = RGBColor(1.0, 1.0, 1.0)
        assert a.midpoint(b) == RGBColor(0.5, 0.5, 0.5)
        assert a.weighted_midpoint(b, 1.0) is a
        assert a.weighted_midpoint(b, 0.75) == RGBColor(0.25, 0.25, 0.25)

    def test_average(self):
        """Test the centroid of several colors."""
        avg = RGBColor.average([RGBColor(0, 0, 0), RGBColor(1, 0, 0), RGBColor(0.5, 0.3, 0.9)])
        assert avg.components == pytest.approx((0.5, 0.1, 0.3))

    def test_average_empty(self):
        """Test that averaging no colors is an error."""
        with pytest.raises(ValueError):
            RGBColor.average([])

    def test_free_function(self):
        """Test the function form."""
        a = RGBColor(0.2, 0.2, 0.2)
        b = RGBColor(0.4, 0.4, 0.4)
        assert mix(a, b, 0.5) == a.mix(b, 0.5)


class TestDistance:
    def test_cube_diagonal(self):
        """Test the distance across the RGB cube."""
        assert RGBColor(0, 0, 0).distance(RGBColor(1, 1, 1)) == pytest.approx(math.sqrt(3.0))

    def test_zero_and_symmetric(self):
        """Test identity and symmetry."""
        a = CIELABColor(50.0, 10.0, -20.0)
        b = CIELABColor(40.0, 13.0, -16.0)
        assert a.distance(a) == 0.0
        assert a.distance(b) == b.distance(a) == pytest.approx(math.sqrt(125.0))
        assert distance(a, b) == a.distance(b)

    def test_different_types_rejected(self):
        """Test that distance needs a common space."""
        with pytest.raises(TypeError):
            distance(RGBColor(0, 0, 0), HSVColor(0, 0, 0))


class TestGradient:
    def test_two_steps_are_the_endpoints(self):
        """Test that n = 2 gives exactly [a, b]."""
        a = RGBColor(0.1, 0.2, 0.3)
        b = RGBColor(0.9, 0.8, 0.7)
        g = a.gradient(b, 2)
        assert list(g) == [a, b]
        assert g[0] is a
        assert g[1] is b

    def test_evenly_spaced(self):
        """Test five evenly spaced colors."""
        g = gradient(RGBColor(0, 0, 0), RGBColor(1, 1, 1), 5)
        assert isinstance(g, Gradient)
        assert len(g) == 5
        assert [c.r for c in g] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    def test_endpoints_exact_for_long_gradients(self):
        """Test that the last element is the end color itself."""
        a = CIELABColor(33.3, 1.1, -7.7)
        b = CIELABColor(66.6, -2.2, 9.9)
        g = a.gradient(b, 17)
        assert g[0] is a
        assert g[-1] is b

    def test_restartable(self):
        """Test that a gradient can be iterated repeatedly."""
        g = RGBColor(0, 0, 0).gradient(RGBColor(1, 0, 0), 4)
        assert list(g) == list(g)

    def test_slicing_and_bounds(self):
        """Test slices and out-of-range indices."""
        g = RGBColor(0, 0, 0).gradient(RGBColor(1, 1, 1), 3)
        assert g[1:] == [g[1], g[2]]
        with pytest.raises(IndexError):
            g[3]

    @pytest.mark.parametrize("n", [0, 1, -4])
    def test_too_short(self, n):
        """Test that a gradient needs both endpoints."""
        with pytest.raises(ValueError):
            RGBColor(0, 0, 0).gradient(RGBColor(1, 1, 1), n)

    def test_non_integer_length(self):
        """Test that the length must be an integer."""
        with pytest.raises(TypeError):
            RGBColor(0, 0, 0).gradient(RGBColor(1, 1, 1), 2.5)

    def test_xyz_gradient_interior_uses_start_illuminant(self):
        """Test that interior XYZ gradient colors stay under the start illuminant."""
        g = XYZColor(0.1, 0.1, 0.1, Illuminant.D65).gradient(XYZColor(0.9, 0.9, 0.9, Illuminant.A), 5)
        assert all(c.illuminant is Illuminant.D65 for c in g[:-1])

    def test_xyz_gradient_ends_on_other_itself(self):
        """Test that an XYZ gradient across illuminants ends exactly on the given end color."""
        a = XYZColor(0.1, 0.1, 0.1, Illuminant.D65)
        b = XYZColor(0.9, 0.9, 0.9, Illuminant.A)
        g = a.gradient(b, 3)
        assert g[0] is a
        assert g[-1] is b
        assert list(a.gradient(b, 2)) == [a, b]

    def test_xyz_gradient_interior_heads_for_adapted_end(self):
        """Test that the interior interpolates toward the end color seen under the start illuminant."""
        a = XYZColor(0.1, 0.1, 0.1, Illuminant.D65)
        b = XYZColor(0.9, 0.9, 0.9, Illuminant.A)
        assert a.gradient(b, 3)[1] == a.mix(b, 0.5)


class TestGamuts:
    def test_box_clamps(self):
        """Test projection onto the unit cube."""
        c = RGBColor(1.2, -0.1, 0.5)
        assert c.nearest_in_gamut(BoxGamut.unit_cube()) == RGBColor(1.0, 0.0, 0.5)

    def test_box_inside_is_unchanged(self):
        """Test that an in-gamut color is returned as is."""
        c = RGBColor(0.2, 0.4, 0.6)
        assert nearest_in_gamut(c, BoxGamut.unit_cube()) is c

    def test_box_bounds_validated(self):
        """Test that lower must not exceed upper."""
        with pytest.raises(ValueError):
            BoxGamut((0, 0, 1), (1, 1, 0))

    def test_protocol(self):
        """Test that the gamut types satisfy the protocol."""
        assert isinstance(BoxGamut.unit_cube(), Gamut)
        assert isinstance(PointGamut([(0, 0, 0)]), Gamut)

    @pytest.mark.parametrize("order", [0, 1])
    def test_point_gamut_tie_break(self, order):
        """Test that equidistant candidates resolve lexicographically."""
        pts = [(0.0, 0.0, 0.0), (2.0, 0.0, 0.0)]
        if order:
            pts.reverse()
        out = RGBColor(1.0, 0.0, 0.0).nearest_in_gamut(PointGamut(pts))
        assert out == RGBColor(0.0, 0.0, 0.0)

    def test_point_gamut_nearest(self):
        """Test a plain nearest-neighbour query."""
        gamut = PointGamut([Coord(0, 0, 0), Coord(1, 1, 1), Coord(0.5, 0.5, 0.4)])
        assert gamut.nearest(Coord(0.6, 0.6, 0.6)) == Coord(0.5, 0.5, 0.4)
        assert gamut.contains(Coord(1, 1, 1))
        assert not gamut.contains(Coord(0.9, 1, 1))

    def test_point_gamut_predicate_filters(self):
        """Test that candidates failing the predicate are dropped."""
        gamut = PointGamut([(0, 0, 0), (1, 1, 1), (3, 3, 3)], predicate=lambda c: c.x < 2)
        assert len(gamut) == 2
        assert gamut.nearest(Coord(3, 3, 3)) == Coord(1, 1, 1)

    def test_point_gamut_empty(self):
        """Test that an empty candidate set is rejected."""
        with pytest.raises(ValueError):
            PointGamut([(1, 1, 1)], predicate=lambda c: False)

    def test_sampled_gamut(self):
        """Test a predicate sampled on a lattice."""
        gamut = SampledGamut(lambda c: c.z <= 0.5, (0, 0, 0), (1, 1, 1), steps=3)
        assert len(gamut) == 18
        assert gamut.contains(Coord(0.3, 0.3, 0.3))
        assert not gamut.contains(Coord(0.3, 0.3, 0.9))
        out = RGBColor(0.5, 0.5, 0.9).nearest_in_gamut(gamut)
        assert out == RGBColor(0.5, 0.5, 0.5)

    def test_sampled_gamut_steps_validated(self):
        """Test that a lattice needs at least two steps per axis."""
        with pytest.raises(ValueError):
            SampledGamut(lambda c: True, (0, 0, 0), (1, 1, 1), steps=1)
