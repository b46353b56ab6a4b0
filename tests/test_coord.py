import math

import numpy as np
import pytest

from tint_coord import Coord


class TestCoordArithmetic:
    def test_add_sub(self):
        """Test componentwise addition and subtraction."""
        a = Coord(1.0, 2.0, 3.0)
        b = Coord(4.0, 5.0, 6.0)
        assert a + b == Coord(5.0, 7.0, 9.0)
        assert b - a == Coord(3.0, 3.0, 3.0)

    def test_negation(self):
        """Test unary minus."""
        assert -Coord(1.0, -2.0, 0.5) == Coord(-1.0, 2.0, -0.5)

    def test_scalar_multiply_both_sides(self):
        """Test scalar multiplication on either side."""
        c = Coord(1.0, 2.0, 3.0)
        assert c * 2 == Coord(2.0, 4.0, 6.0)
        assert 2 * c == Coord(2.0, 4.0, 6.0)

    def test_scalar_divide(self):
        """Test division by a scalar."""
        assert Coord(2.0, 4.0, 6.0) / 2 == Coord(1.0, 2.0, 3.0)

    def test_int_components_compare_equal(self):
        """Test that int and numpy components are normalised to float."""
        assert Coord(1, 2, 3) == Coord(1.0, 2.0, 3.0)
        assert Coord(np.float32(0.5), 1, 2).x == 0.5
        assert hash(Coord(1, 2, 3)) == hash(Coord(1.0, 2.0, 3.0))

    def test_immutable(self):
        """Test that coordinates cannot be modified in place."""
        c = Coord(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            c.x = 5.0


class TestCoordGeometry:
    def test_euclidean_distance(self):
        """Test a 3-4-5 triangle."""
        assert Coord(0.0, 0.0, 0.0).euclidean_distance(Coord(3.0, 4.0, 0.0)) == 5.0

    def test_lerp_endpoints_are_exact(self):
        """Test that t=0 and t=1 return the endpoints themselves."""
        a = Coord(0.1, 0.2, 0.3)
        b = Coord(0.7, 0.11, 0.9)
        assert a.lerp(b, 0.0) is a
        assert a.lerp(b, 1.0) is b

    def test_lerp_quarter(self):
        """Test interpolation at a quarter of the way."""
        assert Coord(0.0, 0.0, 0.0).lerp(Coord(4.0, 8.0, -4.0), 0.25) == Coord(1.0, 2.0, -1.0)

    def test_midpoint(self):
        """Test the midpoint of two coordinates."""
        assert Coord(0.0, 2.0, 4.0).midpoint(Coord(2.0, 4.0, 6.0)) == Coord(1.0, 3.0, 5.0)

    def test_weighted_midpoint(self):
        """Test that the weight applies to self."""
        a = Coord(0.0, 0.0, 0.0)
        b = Coord(10.0, 10.0, 10.0)
        assert a.weighted_midpoint(b, 1.0) is a
        assert a.weighted_midpoint(b, 0.75) == Coord(2.5, 2.5, 2.5)

    def test_average(self):
        """Test the centroid of several coordinates."""
        avg = Coord.average([Coord(0.0, 0.0, 0.0), Coord(2.0, 4.0, 6.0), Coord(1.0, 2.0, 3.0)])
        assert avg == Coord(1.0, 2.0, 3.0)

    def test_average_empty_raises(self):
        """Test that averaging nothing is an error."""
        with pytest.raises(ValueError):
            Coord.average([])


class TestCoordConversion:
    def test_iter_and_tuple(self):
        """Test unpacking and tuple export."""
        x, y, z = Coord(1.0, 2.0, 3.0)
        assert (x, y, z) == (1.0, 2.0, 3.0)
        assert Coord(1.0, 2.0, 3.0).as_tuple() == (1.0, 2.0, 3.0)

    def test_array_round_trip(self):
        """Test conversion to and from numpy arrays."""
        c = Coord(0.25, -1.5, math.pi)
        arr = c.as_array()
        assert arr.dtype == np.float64
        assert Coord.from_array(arr) == c
