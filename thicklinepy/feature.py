import math
from dataclasses import dataclass
from typing import Any, Dict, Literal

from .constants import (
    DEFAULT_FEATURE_LENGTH,
    DEFAULT_FEATURE_WIDTH,
    FEATURE_ARROW,
    FEATURE_NONE,
    FEATURE_T,
    FEATURE_TYPES,
)

FeatureType = Literal["None", "Arrow", "T"]


@dataclass(frozen=True)
class FeatureSpec:
    """
    An optional end cap attached to one end of a thick line.

    ``width`` and ``length`` are kept even when ``type`` is ``"None"`` so a
    host can restore them when the feature is switched back on. They only
    take part in the geometry for ``"Arrow"`` and ``"T"``.
    """

    type: FeatureType = FEATURE_NONE
    width: float = DEFAULT_FEATURE_WIDTH
    length: float = DEFAULT_FEATURE_LENGTH

    def __post_init__(self):
        if self.type not in FEATURE_TYPES:
            raise ValueError(
                f"Unknown feature type '{self.type}'. Available: {FEATURE_TYPES}"
            )
        for name in ("width", "length"):
            value = getattr(self, name)
            # sign and size are checked per end by the validator
            if not math.isfinite(value):
                raise ValueError(f"Feature {name} must be finite, got {value}")
        # normalise ints so equality and JSON output stay float-typed
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "length", float(self.length))

    @classmethod
    def none(
        cls,
        width: float = DEFAULT_FEATURE_WIDTH,
        length: float = DEFAULT_FEATURE_LENGTH,
    ) -> "FeatureSpec":
        return cls(FEATURE_NONE, width, length)

    @classmethod
    def arrow(cls, width: float, length: float) -> "FeatureSpec":
        return cls(FEATURE_ARROW, width, length)

    @classmethod
    def t(cls, width: float, length: float) -> "FeatureSpec":
        return cls(FEATURE_T, width, length)

    @property
    def is_none(self) -> bool:
        return self.type == FEATURE_NONE

    @property
    def effective_length(self) -> float:
        """Length consumed along the axis; zero when there is no feature."""
        return 0.0 if self.is_none else self.length

    @property
    def effective_width(self) -> float:
        return 0.0 if self.is_none else self.width

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "width": self.width,
            "length": self.length,
        }

    @staticmethod
    def from_json(json_data: Dict[str, Any]) -> "FeatureSpec":
        return FeatureSpec(
            json_data.get("type", FEATURE_NONE),
            json_data.get("width", DEFAULT_FEATURE_WIDTH),
            json_data.get("length", DEFAULT_FEATURE_LENGTH),
        )


def is_feature_configurable(spec: FeatureSpec) -> bool:
    """Whether the width/length fields of ``spec`` should be editable in a UI."""
    return spec.type in (FEATURE_ARROW, FEATURE_T)
