"""
The single call sequence exposed to hosts: derive, validate, emit.

Either the complete geometry and shapes are produced or only an error
message is; there are no partial results.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .emitter import ThickLineShapes, emit
from .errors import ThickLineError
from .geometry import ThickLineGeometry, ThickLineInput, derive
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThickLineResult:
    """
    Outcome of one pipeline run.

    Results compare by value, so a host can tell whether anything it shows
    needs refreshing by comparing the new result with the previous one.
    """

    # compare with ==; Vector fields are mutable numpy arrays
    __hash__ = None

    geometry: Optional[ThickLineGeometry] = None
    shapes: Optional[ThickLineShapes] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "ThickLineResult":
        return cls(error=message)

    def to_json(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "error": self.error,
            "geometry": self.geometry.to_json() if self.geometry is not None else None,
            "shapes": self.shapes.to_json() if self.shapes is not None else None,
        }


def build(thick_line: ThickLineInput) -> Tuple[ThickLineGeometry, ThickLineShapes]:
    """
    Run the full pipeline and return the geometry and shapes.

    Raises:
        DegenerateInputError: If the endpoints coincide
        ValidationError: If any validation rule fails
    """
    geometry = derive(thick_line)
    validate(thick_line, geometry)
    return geometry, emit(thick_line, geometry)


def derive_and_validate(thick_line: ThickLineInput) -> ThickLineResult:
    """Like :func:`build` but reports failures as ``ThickLineResult.error``."""
    try:
        geometry, shapes = build(thick_line)
    except ThickLineError as e:
        logger.debug("Thick line rejected: %s", e.message)
        return ThickLineResult.failure(e.message)
    return ThickLineResult(geometry=geometry, shapes=shapes)
