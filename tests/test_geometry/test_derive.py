import math

import numpy as np
import pytest

from thicklinepy.cad_types import Vector
from thicklinepy.errors import DegenerateInputError
from thicklinepy.feature import FeatureSpec
from thicklinepy.geometry import ThickLineInput, derive


def make_input(a=(0, 0), b=(10, 0), **kwargs):
    kwargs.setdefault("width", 2.0)
    return ThickLineInput.from_points(a, b, **kwargs)


class TestDerive:
    """Test direction frame, tip and base derivation."""

    def test_horizontal_frame(self):
        """Test the frame of a line along +X."""
        geometry = derive(make_input())
        assert geometry.length == 10.0
        assert geometry.axis_dir == Vector(1, 0)
        assert geometry.normal_dir == Vector(0, 1)
        assert geometry.tip_a == Vector(0, 0)
        assert geometry.tip_b == Vector(10, 0)
        assert geometry.base_a == Vector(0, 0)
        assert geometry.base_b == Vector(10, 0)
        assert geometry.body_span == 10.0

    def test_normal_is_left_of_axis(self):
        """Test that the normal always points to the left of A -> B."""
        geometry = derive(make_input(a=(10, 0), b=(0, 0)))
        assert geometry.axis_dir == Vector(-1, 0)
        assert geometry.normal_dir == Vector(0, -1)

        geometry = derive(make_input(a=(0, 0), b=(0, 5)))
        assert geometry.normal_dir == Vector(-1, 0)

    @pytest.mark.parametrize(
        "a, b",
        [((0, 0), (3, 4)), ((1.5, -2), (-7, 11)), ((1e6, 1e6), (1e6 + 1e-3, 1e6)), ((0, 0), (0, -1))],
    )
    def test_frame_is_orthonormal(self, a, b):
        """Test perpendicularity and unit length of the frame."""
        geometry = derive(make_input(a=a, b=b))
        assert math.isclose(geometry.axis_dir.length(), 1.0, rel_tol=1e-12)
        assert math.isclose(geometry.normal_dir.length(), 1.0, rel_tol=1e-12)
        assert abs(geometry.axis_dir.dot(geometry.normal_dir)) < 1e-15

    def test_leads_extend_outward(self):
        """Test that leads push the tips away from the segment."""
        geometry = derive(make_input(lead_a=2, lead_b=3))
        assert geometry.tip_a == Vector(-2, 0)
        assert geometry.tip_b == Vector(13, 0)
        assert geometry.base_a == Vector(-2, 0)
        assert geometry.base_b == Vector(13, 0)

    def test_features_pull_bases_inward(self):
        """Test that feature lengths pull the bases towards the body."""
        geometry = derive(
            make_input(
                lead_a=1,
                lead_b=1,
                feature_a=FeatureSpec.arrow(4, 1),
                feature_b=FeatureSpec.t(3, 2),
            )
        )
        assert geometry.tip_a == Vector(-1, 0)
        assert geometry.base_a == Vector(0, 0)
        assert geometry.tip_b == Vector(11, 0)
        assert geometry.base_b == Vector(9, 0)
        assert geometry.body_span == pytest.approx(9.0)

    def test_none_feature_consumes_nothing(self):
        """Test that a None feature leaves the base exactly on the tip."""
        geometry = derive(
            make_input(
                a=(0.1, 0.7),
                b=(3.3, -2.9),
                lead_a=0.37,
                feature_a=FeatureSpec.none(width=5, length=3),
            )
        )
        np.testing.assert_array_equal(geometry.base_a, geometry.tip_a)

    def test_diagonal(self):
        """Test a 3-4-5 diagonal line with leads."""
        geometry = derive(make_input(a=(0, 0), b=(3, 4), lead_a=5, lead_b=5))
        assert geometry.length == 5.0
        assert geometry.axis_dir == Vector(0.6, 0.8)
        assert geometry.normal_dir == Vector(-0.8, 0.6)
        assert geometry.tip_a == Vector(-3, -4)
        assert geometry.tip_b == Vector(6, 8)

    @pytest.mark.parametrize("b", [(0, 0), (1e-13, 0), (0, -5e-13)])
    def test_coincident_points(self, b):
        """Test that coincident endpoints produce no geometry."""
        with pytest.raises(DegenerateInputError) as exc_info:
            derive(make_input(a=(0, 0), b=b))
        assert exc_info.value.message == "Points A and B are coincident or too close together."

    def test_just_above_epsilon(self):
        """Test that points slightly further apart than the epsilon are accepted."""
        geometry = derive(make_input(a=(0, 0), b=(1e-11, 0)))
        assert geometry.axis_dir == Vector(1, 0)

    def test_deterministic(self):
        """Test that identical inputs give bit-identical geometry."""
        kwargs = dict(
            a=(0.3, 1.7),
            b=(-4.1, 9.2),
            lead_a=0.4,
            lead_b=1.1,
            feature_a=FeatureSpec.arrow(2.5, 0.6),
            feature_b=FeatureSpec.t(3.0, 0.2),
        )
        first = derive(make_input(**kwargs))
        second = derive(make_input(**kwargs))
        for name in ("axis_dir", "normal_dir", "tip_a", "tip_b", "base_a", "base_b"):
            np.testing.assert_array_equal(getattr(first, name), getattr(second, name))
        assert first.length == second.length


class TestThickLineInput:
    """Test the input snapshot."""

    def test_coerces_points_and_numbers(self):
        """Test that tuples and ints are normalised."""
        thick_line = ThickLineInput((0, 0), (1, 2), width=1, lead_a=0, lead_b=2)
        assert isinstance(thick_line.a, Vector)
        assert isinstance(thick_line.width, float)
        assert thick_line.lead_b == 2.0

    def test_is_immutable(self):
        """Test that the snapshot is frozen."""
        thick_line = make_input()
        with pytest.raises(AttributeError):
            thick_line.width = 3.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"lead_a": -1.0},
            {"lead_b": float("nan")},
            {"width": float("inf")},
            {"a": (float("nan"), 0)},
        ],
    )
    def test_rejects_bad_values(self, kwargs):
        """Test construction guards."""
        with pytest.raises(ValueError):
            make_input(**kwargs)

    def test_non_positive_width_is_left_to_validation(self):
        """Test that zero or negative width can still be constructed."""
        assert make_input(width=0).width == 0.0
        assert make_input(width=-1).width == -1.0

    def test_swapped(self):
        """Test describing the line from the other end."""
        thick_line = make_input(lead_a=1, feature_b=FeatureSpec.arrow(3, 1))
        swapped = thick_line.swapped()
        assert swapped.a == thick_line.b
        assert swapped.b == thick_line.a
        assert swapped.lead_b == 1.0
        assert swapped.feature_a == FeatureSpec.arrow(3, 1)
        assert swapped.swapped() == thick_line

    def test_json_round_trip(self):
        """Test JSON serialization of the snapshot."""
        thick_line = make_input(lead_a=1, feature_a=FeatureSpec.t(3, 1))
        assert ThickLineInput.from_json(thick_line.to_json()) == thick_line
