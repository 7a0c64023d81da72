"""Geometric legality checks run between derivation and emission."""

import logging
from typing import Optional

from .constants import EPS_COINCIDENT, EPS_SKETCH_LEN
from .errors import ValidationError
from .feature import FeatureSpec
from .geometry import COINCIDENT_MESSAGE, ThickLineGeometry, ThickLineInput

logger = logging.getLogger(__name__)

WIDTH_MESSAGE = "Width of line must be > 0."
SPAN_MESSAGE = (
    "Leads and/or feature lengths consume the segment. "
    "Reduce leads/features or move A and B further apart."
)


def _check_feature(label: str, feature: FeatureSpec, line_width: float) -> None:
    if feature.is_none:
        return
    if feature.width < line_width:
        raise ValidationError(f"Feature {label} width must be >= line width.")
    if feature.length <= 0:
        raise ValidationError(f"Feature {label} length must be > 0.")


def validate(thick_line: ThickLineInput, geometry: ThickLineGeometry) -> None:
    """
    Check that a derived thick line can be drawn.

    Checks run from most fundamental to most derived and stop at the first
    failure, so the message always names the most actionable problem.

    Args:
        thick_line: The input snapshot
        geometry: Geometry derived from ``thick_line``

    Raises:
        ValidationError: With a user-facing message for the first violated rule
    """
    if thick_line.width <= 0:
        raise ValidationError(WIDTH_MESSAGE)

    if geometry.length <= EPS_COINCIDENT:
        raise ValidationError(COINCIDENT_MESSAGE)

    _check_feature("A", thick_line.feature_a, thick_line.width)
    _check_feature("B", thick_line.feature_b, thick_line.width)

    # main body between the feature bases, signed along the axis
    if geometry.body_span <= EPS_SKETCH_LEN:
        raise ValidationError(SPAN_MESSAGE)

    logger.debug("Thick line validated, body span %.6g", geometry.body_span)


def check(thick_line: ThickLineInput, geometry: ThickLineGeometry) -> Optional[str]:
    """Like :func:`validate` but returns the error message instead of raising."""
    try:
        validate(thick_line, geometry)
    except ValidationError as e:
        return e.message
    return None
