"""Unit tests for points and vectors.

Tests cover:
- Point/vector construction and the w discriminator
- Arithmetic (add, subtract, negate, scale, divide)
- Magnitude, normalization, dot and cross products
- Reflection about a normal
"""

import math

import pytest


class TestTupleConstruction:
    """Tests for building points and vectors."""

    def test_tuple_with_w_one_is_point(self):
        """A tuple with w=1 is a point."""
        from phongtrace.core.tuples import Tuple4

        a = Tuple4(4.3, -4.2, 3.1, 1.0)
        assert a.x == 4.3
        assert a.y == -4.2
        assert a.z == 3.1
        assert a.is_point()
        assert not a.is_vector()

    def test_tuple_with_w_zero_is_vector(self):
        """A tuple with w=0 is a vector."""
        from phongtrace.core.tuples import Tuple4

        a = Tuple4(4.3, -4.2, 3.1, 0.0)
        assert a.is_vector()
        assert not a.is_point()

    def test_point_and_vector_factories(self):
        """point() and vector() set w to 1 and 0."""
        from phongtrace.core.tuples import Tuple4, point, vector

        assert point(4, -4, 3) == Tuple4(4, -4, 3, 1)
        assert vector(4, -4, 3) == Tuple4(4, -4, 3, 0)
        assert Tuple4.point(1, 2, 3) == point(1, 2, 3)

    def test_origin(self):
        """ORIGIN is the point (0, 0, 0)."""
        from phongtrace.core.tuples import ORIGIN, point

        assert ORIGIN == point(0, 0, 0)

    def test_tuples_are_immutable(self):
        """Tuples cannot be modified after construction."""
        from dataclasses import FrozenInstanceError

        from phongtrace.core.tuples import point

        p = point(1, 2, 3)
        with pytest.raises(FrozenInstanceError):
            p.x = 5.0


class TestTupleArithmetic:
    """Tests for tuple arithmetic."""

    def test_add_point_and_vector(self):
        """Adding a vector to a point gives a point."""
        from phongtrace.core.tuples import Tuple4

        result = Tuple4(3, -2, 5, 1) + Tuple4(-2, 3, 1, 0)
        assert result == Tuple4(1, 1, 6, 1)
        assert result.is_point()

    def test_subtract_two_points(self):
        """Subtracting two points gives the vector between them."""
        from phongtrace.core.tuples import point, vector

        assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)

    def test_subtract_vector_from_point(self):
        """Subtracting a vector from a point gives a point."""
        from phongtrace.core.tuples import point, vector

        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_subtract_two_vectors(self):
        """Subtracting two vectors gives a vector."""
        from phongtrace.core.tuples import vector

        assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)

    def test_negate(self):
        """Negation flips every component, including w."""
        from phongtrace.core.tuples import Tuple4

        assert -Tuple4(1, -2, 3, -4) == Tuple4(-1, 2, -3, 4)

    def test_multiply_by_scalar(self):
        """Scalar multiplication works from either side."""
        from phongtrace.core.tuples import Tuple4

        a = Tuple4(1, -2, 3, -4)
        assert a * 3.5 == Tuple4(3.5, -7, 10.5, -14)
        assert 0.5 * a == Tuple4(0.5, -1, 1.5, -2)

    def test_divide_by_scalar(self):
        """Division scales every component."""
        from phongtrace.core.tuples import Tuple4

        assert Tuple4(1, -2, 3, -4) / 2 == Tuple4(0.5, -1, 1.5, -2)


class TestTupleGeometry:
    """Tests for magnitude, normalization, dot and cross products."""

    @pytest.mark.parametrize(
        "components,expected",
        [
            ((1, 0, 0), 1.0),
            ((0, 1, 0), 1.0),
            ((0, 0, 1), 1.0),
            ((1, 2, 3), math.sqrt(14)),
            ((-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_magnitude(self, components, expected):
        """Magnitude is the Euclidean length of (x, y, z)."""
        from phongtrace.core.tuples import vector

        assert abs(vector(*components).magnitude() - expected) < 1e-9

    def test_normalize(self):
        """Normalizing gives a unit vector in the same direction."""
        from phongtrace.core.tuples import vector

        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
        n = vector(1, 2, 3).normalize()
        root14 = math.sqrt(14)
        assert n.approx_eq(vector(1 / root14, 2 / root14, 3 / root14))
        assert abs(n.magnitude() - 1.0) < 1e-9

    def test_normalize_zero_vector_raises(self):
        """A zero-length tuple has no direction."""
        from phongtrace.core.tuples import vector

        with pytest.raises(ValueError, match="zero-length"):
            vector(0, 0, 0).normalize()

    def test_dot_product(self):
        """Dot product of two vectors."""
        from phongtrace.core.tuples import vector

        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == 20.0

    def test_cross_product(self):
        """Cross product is anti-commutative and yields a vector."""
        from phongtrace.core.tuples import vector

        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)
        assert a.cross(b).is_vector()

    def test_reflect_at_45_degrees(self):
        """A vector approaching at 45 degrees bounces off at 45 degrees."""
        from phongtrace.core.tuples import vector

        assert vector(1, -1, 0).reflect(vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        """Reflection about a slanted normal."""
        from phongtrace.core.tuples import vector

        half = math.sqrt(2) / 2
        r = vector(0, -1, 0).reflect(vector(half, half, 0))
        assert r.approx_eq(vector(1, 0, 0))

    def test_approx_eq_tolerance(self):
        """approx_eq accepts differences below epsilon only."""
        from phongtrace.core.tuples import EPSILON, point

        assert point(1, 2, 3).approx_eq(point(1 + EPSILON / 2, 2, 3))
        assert not point(1, 2, 3).approx_eq(point(1 + EPSILON * 2, 2, 3))
