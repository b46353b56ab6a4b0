import numpy as np
import pytest

from tint_adaptation import BRADFORD, adapt, bradford_matrix
from tint_illuminants import CustomIlluminant, Illuminant


class TestBradfordMatrix:
    def test_bradford_inverse_is_exact(self):
        """Test that the computed Bradford inverse composes to the identity."""
        assert BRADFORD.identity_error() < 1e-12

    def test_same_illuminant_is_identity(self):
        """Test the identity for a same-illuminant pair."""
        np.testing.assert_array_equal(bradford_matrix(Illuminant.D65, Illuminant.D65), np.eye(3))

    def test_d65_to_d50_reference(self):
        """Test against the published D65 → D50 Bradford matrix."""
        expected = np.array([
            [ 1.0478112,  0.0228866, -0.0501270],
            [ 0.0295424,  0.9904844, -0.0170491],
            [-0.0092345,  0.0150436,  0.7521316],
        ])
        np.testing.assert_allclose(
            bradford_matrix(Illuminant.D65, Illuminant.D50), expected, atol=1e-5
        )

    def test_memoised(self):
        """Test that a pair is computed once and shared."""
        assert bradford_matrix(Illuminant.A, Illuminant.D65) is bradford_matrix(
            Illuminant.A, Illuminant.D65
        )

    def test_read_only(self):
        """Test that the cached matrix cannot be corrupted."""
        m = bradford_matrix(Illuminant.D65, Illuminant.D50)
        with pytest.raises(ValueError):
            m[0, 0] = 0.0


class TestAdapt:
    def test_same_illuminant_unchanged(self):
        """Test that same-illuminant adaptation returns the input values."""
        xyz = (0.123456789, 0.5, 1.7)
        assert adapt(xyz, Illuminant.D65, Illuminant.D65) == xyz

    def test_white_maps_to_white(self):
        """Test that the source white lands on the target white."""
        out = adapt(Illuminant.D65.white_point(), Illuminant.D65, Illuminant.D50)
        np.testing.assert_allclose(out, Illuminant.D50.white_point(), atol=1e-12)

    def test_round_trip(self):
        """Test adapting there and back."""
        xyz = (0.3, 0.2, 0.6)
        there = adapt(xyz, Illuminant.F11, Illuminant.D75)
        back = adapt(there, Illuminant.D75, Illuminant.F11)
        np.testing.assert_allclose(back, xyz, atol=1e-12)

    def test_negative_values_pass_through(self):
        """Test that imaginary colors are adapted, not clamped."""
        out = adapt((-0.1, 0.2, -0.3), Illuminant.D65, Illuminant.A)
        back = adapt(out, Illuminant.A, Illuminant.D65)
        np.testing.assert_allclose(back, (-0.1, 0.2, -0.3), atol=1e-12)

    def test_custom_illuminant(self):
        """Test adaptation to a temperature-derived illuminant."""
        warm = CustomIlluminant.from_cct(3200)
        out = adapt(Illuminant.D65.white_point(), Illuminant.D65, warm)
        np.testing.assert_allclose(out, warm.white_point(), atol=1e-12)
