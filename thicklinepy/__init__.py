"""
thicklinepy - Thick line sketch shapes with Arrow and T end features.

This package derives, validates and emits the polygons of a constant-width
line between two sketch points, optionally capped at either end.
"""

__version__ = "0.1.0"

from .app import ThickLineCommand, format_error, minimum_feature_width
from .cad_types import Vector
from .emitter import ThickLineShapes, emit
from .errors import DegenerateInputError, ThickLineError, ValidationError
from .feature import FeatureSpec, is_feature_configurable
from .geometry import ThickLineGeometry, ThickLineInput, derive
from .pipeline import ThickLineResult, build, derive_and_validate
from .primitives import Line, Polygon
from .settings import ThickLineSettings, load_settings, save_settings, settings_path
from .sketch2d import MemorySketch2D, Sketch2D, draw_shapes
from .validator import check, validate

__all__ = [
    # Pipeline
    "ThickLineInput",
    "ThickLineGeometry",
    "ThickLineShapes",
    "ThickLineResult",
    "derive",
    "validate",
    "check",
    "emit",
    "build",
    "derive_and_validate",
    # Geometry types
    "Vector",
    "Line",
    "Polygon",
    "FeatureSpec",
    "is_feature_configurable",
    # Errors
    "ThickLineError",
    "DegenerateInputError",
    "ValidationError",
    # Host
    "ThickLineCommand",
    "ThickLineSettings",
    "Sketch2D",
    "MemorySketch2D",
    "draw_shapes",
    "format_error",
    "minimum_feature_width",
    "load_settings",
    "save_settings",
    "settings_path",
]
