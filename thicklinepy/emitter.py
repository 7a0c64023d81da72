"""Turns validated thick line geometry into literal polygon outlines."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .cad_types import Vector
from .constants import FEATURE_ARROW, FEATURE_T
from .feature import FeatureSpec
from .geometry import ThickLineGeometry, ThickLineInput
from .primitives import Polygon


@dataclass(frozen=True)
class ThickLineShapes:
    """The body rectangle plus up to two end feature polygons."""

    # compare with ==; Vector fields are mutable numpy arrays
    __hash__ = None

    body: Polygon
    end_a: Optional[Polygon] = None
    end_b: Optional[Polygon] = None

    def polygons(self) -> List[Polygon]:
        return [p for p in (self.body, self.end_a, self.end_b) if p is not None]

    def to_json(self) -> Dict[str, Any]:
        return {
            "body": self.body.to_json(),
            "end_a": self.end_a.to_json() if self.end_a is not None else None,
            "end_b": self.end_b.to_json() if self.end_b is not None else None,
        }


def _feature_polygon(
    feature: FeatureSpec,
    base: Vector,
    tip: Vector,
    normal_dir: Vector,
    outward: Vector,
) -> Optional[Polygon]:
    """
    Build the end cap sitting between ``base`` and ``tip``.

    ``outward`` is the unit axis direction pointing from the body towards the
    tip of this end.
    """
    if feature.type not in (FEATURE_ARROW, FEATURE_T):
        return None

    side = normal_dir * (feature.effective_width * 0.5)
    left = base + side
    right = base - side

    if feature.type == FEATURE_ARROW:
        return Polygon.triangle(left, tip, right)

    shift = outward * feature.length
    return Polygon.rectangle(left, left + shift, right + shift, right)


def emit(thick_line: ThickLineInput, geometry: ThickLineGeometry) -> ThickLineShapes:
    """
    Produce the polygons of a thick line.

    Must only be called with geometry that passed
    :func:`thicklinepy.validator.validate`; the body is assumed to have a
    positive span.
    """
    half_width = geometry.normal_dir * (thick_line.width * 0.5)

    body = Polygon.rectangle(
        geometry.base_a + half_width,
        geometry.base_b + half_width,
        geometry.base_b - half_width,
        geometry.base_a - half_width,
    )

    end_a = _feature_polygon(
        thick_line.feature_a,
        geometry.base_a,
        geometry.tip_a,
        geometry.normal_dir,
        -geometry.axis_dir,
    )
    end_b = _feature_polygon(
        thick_line.feature_b,
        geometry.base_b,
        geometry.tip_b,
        geometry.normal_dir,
        geometry.axis_dir,
    )
    return ThickLineShapes(body=body, end_a=end_a, end_b=end_b)
