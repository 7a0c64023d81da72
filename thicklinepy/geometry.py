"""
Geometry derivation for thick lines.

A thick line is described by two endpoints ``a`` and ``b`` in sketch space,
a body width, a lead-in distance per end and an optional end feature per end.
:func:`derive` turns that input snapshot into the direction frame and the
tip/base points every later stage works from::

    tip_a -- base_a ================ base_b -- tip_b

where ``tip_a`` lies ``lead_a`` beyond ``a`` and ``base_a`` lies one feature
length inside ``tip_a`` (likewise for the b end).

All functions here are pure: the same input always gives the same geometry.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict

from .cad_types import Vector, VectorLike, as_vector
from .constants import DEFAULT_LEAD, DEFAULT_WIDTH, EPS_COINCIDENT
from .errors import DegenerateInputError
from .feature import FeatureSpec

logger = logging.getLogger(__name__)

COINCIDENT_MESSAGE = "Points A and B are coincident or too close together."


@dataclass(frozen=True)
class ThickLineInput:
    """Immutable snapshot of everything needed to build one thick line."""

    # compare with ==; Vector fields are mutable numpy arrays
    __hash__ = None

    a: Vector
    b: Vector
    width: float = DEFAULT_WIDTH
    lead_a: float = DEFAULT_LEAD
    lead_b: float = DEFAULT_LEAD
    feature_a: FeatureSpec = field(default_factory=FeatureSpec.none)
    feature_b: FeatureSpec = field(default_factory=FeatureSpec.none)

    def __post_init__(self):
        a = as_vector(self.a)
        b = as_vector(self.b)
        if not (a.is_finite() and b.is_finite()):
            raise ValueError("Endpoints must have finite coordinates")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

        # width is range-checked by the validator, only finiteness here
        if not math.isfinite(self.width):
            raise ValueError(f"Width must be finite, got {self.width}")
        object.__setattr__(self, "width", float(self.width))
        for name in ("lead_a", "lead_b"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite value >= 0, got {value}")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_points(
        cls, a: VectorLike, b: VectorLike, **kwargs: Any
    ) -> "ThickLineInput":
        return cls(as_vector(a), as_vector(b), **kwargs)

    def swapped(self) -> "ThickLineInput":
        """The same line described from the other end."""
        return ThickLineInput(
            a=self.b,
            b=self.a,
            width=self.width,
            lead_a=self.lead_b,
            lead_b=self.lead_a,
            feature_a=self.feature_b,
            feature_b=self.feature_a,
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "a": self.a.to_json(),
            "b": self.b.to_json(),
            "width": self.width,
            "lead_a": self.lead_a,
            "lead_b": self.lead_b,
            "feature_a": self.feature_a.to_json(),
            "feature_b": self.feature_b.to_json(),
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "ThickLineInput":
        return ThickLineInput(
            a=Vector.from_json(json_data["a"]),
            b=Vector.from_json(json_data["b"]),
            width=json_data.get("width", DEFAULT_WIDTH),
            lead_a=json_data.get("lead_a", DEFAULT_LEAD),
            lead_b=json_data.get("lead_b", DEFAULT_LEAD),
            feature_a=FeatureSpec.from_json(json_data.get("feature_a", {})),
            feature_b=FeatureSpec.from_json(json_data.get("feature_b", {})),
        )


@dataclass(frozen=True)
class ThickLineGeometry:
    """Direction frame and key points derived from a :class:`ThickLineInput`."""

    # compare with ==; Vector fields are mutable numpy arrays
    __hash__ = None

    length: float
    axis_dir: Vector  # unit vector from a to b
    normal_dir: Vector  # axis_dir rotated 90 degrees counter-clockwise
    tip_a: Vector
    tip_b: Vector
    base_a: Vector
    base_b: Vector

    @property
    def body_span(self) -> float:
        """Signed length of the main body measured along ``axis_dir``."""
        return (self.base_b - self.base_a).dot(self.axis_dir)

    def to_json(self) -> Dict[str, Any]:
        return {
            "length": self.length,
            "axis_dir": self.axis_dir.to_json(),
            "normal_dir": self.normal_dir.to_json(),
            "tip_a": self.tip_a.to_json(),
            "tip_b": self.tip_b.to_json(),
            "base_a": self.base_a.to_json(),
            "base_b": self.base_b.to_json(),
        }


def derive(thick_line: ThickLineInput) -> ThickLineGeometry:
    """
    Compute the direction frame, tips and feature bases of a thick line.

    Args:
        thick_line: The input snapshot

    Returns:
        ThickLineGeometry: The derived geometry

    Raises:
        DegenerateInputError: If ``a`` and ``b`` are closer than ``EPS_COINCIDENT``
    """
    diff = thick_line.b - thick_line.a
    length = diff.length()
    if length <= EPS_COINCIDENT:
        raise DegenerateInputError(COINCIDENT_MESSAGE)

    axis_dir = diff.normalize()
    normal_dir = axis_dir.perp_ccw()

    # leads always extend outward, away from the segment
    tip_a = thick_line.a - axis_dir * thick_line.lead_a
    tip_b = thick_line.b + axis_dir * thick_line.lead_b

    # feature bases are pulled inward from the tips by the feature length
    base_a = tip_a + axis_dir * thick_line.feature_a.effective_length
    base_b = tip_b - axis_dir * thick_line.feature_b.effective_length

    geometry = ThickLineGeometry(
        length=length,
        axis_dir=axis_dir,
        normal_dir=normal_dir,
        tip_a=tip_a,
        tip_b=tip_b,
        base_a=base_a,
        base_b=base_b,
    )
    logger.debug("Derived thick line geometry: %r", geometry)
    return geometry
