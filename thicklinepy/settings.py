"""
Persisted defaults for the thick line command.

Settings live in a small ``key=value`` text file that is rewritten after every
successful run and read back as the defaults of the next one. The format has
no version: unknown keys and unreadable lines are skipped and missing keys
fall back to the built-in defaults.

Negative widths and feature sizes are loaded as written so the validator can
report them. Negative leads are skipped like unparseable values, because an
input snapshot cannot hold them.
"""

import logging
import math
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .cad_types import VectorLike
from .constants import (
    DEFAULT_FEATURE_LENGTH,
    DEFAULT_FEATURE_TYPE,
    DEFAULT_FEATURE_WIDTH,
    DEFAULT_LEAD,
    DEFAULT_WIDTH,
    FEATURE_TYPES,
    SETTINGS_ENV_VAR,
    SETTINGS_FILE_NAME,
    SETTINGS_KEYS,
)
from .feature import FeatureSpec
from .geometry import ThickLineInput

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass
class ThickLineSettings:
    width: float = DEFAULT_WIDTH
    feature_a_type: str = DEFAULT_FEATURE_TYPE
    lead_a: float = DEFAULT_LEAD
    feature_a_length: float = DEFAULT_FEATURE_LENGTH
    feature_a_width: float = DEFAULT_FEATURE_WIDTH
    feature_b_type: str = DEFAULT_FEATURE_TYPE
    lead_b: float = DEFAULT_LEAD
    feature_b_length: float = DEFAULT_FEATURE_LENGTH
    feature_b_width: float = DEFAULT_FEATURE_WIDTH

    @property
    def feature_a(self) -> FeatureSpec:
        return FeatureSpec(self.feature_a_type, self.feature_a_width, self.feature_a_length)

    @property
    def feature_b(self) -> FeatureSpec:
        return FeatureSpec(self.feature_b_type, self.feature_b_width, self.feature_b_length)

    def to_input(self, a: VectorLike, b: VectorLike) -> ThickLineInput:
        """Build an input snapshot for the endpoints ``a`` and ``b``."""
        return ThickLineInput.from_points(
            a,
            b,
            width=self.width,
            lead_a=self.lead_a,
            lead_b=self.lead_b,
            feature_a=self.feature_a,
            feature_b=self.feature_b,
        )

    @classmethod
    def from_input(cls, thick_line: ThickLineInput) -> "ThickLineSettings":
        return cls(
            width=thick_line.width,
            feature_a_type=thick_line.feature_a.type,
            lead_a=thick_line.lead_a,
            feature_a_length=thick_line.feature_a.length,
            feature_a_width=thick_line.feature_a.width,
            feature_b_type=thick_line.feature_b.type,
            lead_b=thick_line.lead_b,
            feature_b_length=thick_line.feature_b.length,
            feature_b_width=thick_line.feature_b.width,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Settings keyed by their on-disk names, in file order."""
        return dict(zip(SETTINGS_KEYS, (getattr(self, f.name) for f in fields(self))))


# on-disk key -> attribute name
_KEY_TO_FIELD = dict(zip(SETTINGS_KEYS, (f.name for f in fields(ThickLineSettings))))
_TYPE_KEYS = {"featAType", "featBType"}
_LEAD_KEYS = {"leadA_cm", "leadB_cm"}


def settings_path() -> Path:
    """
    Location of the settings file.

    ``$THICKLINE_SETTINGS`` wins if set. Otherwise the per-user application
    data directory of the platform is used.
    """
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)

    home = Path.home()
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", home))
        return base / "ThickLine" / SETTINGS_FILE_NAME
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "ThickLine" / SETTINGS_FILE_NAME
    base = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return base / "thickline" / SETTINGS_FILE_NAME


def _parse_value(key: str, value: str) -> Optional[Any]:
    """Return the typed value for ``key`` or None if it cannot be used."""
    if key in _TYPE_KEYS:
        return value if value in FEATURE_TYPES else None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if key in _LEAD_KEYS and number < 0:
        return None
    return number


def load_settings(path: Optional[PathLike] = None) -> ThickLineSettings:
    """
    Read settings from ``path`` (default: :func:`settings_path`).

    A missing or unreadable file yields the defaults.
    """
    path = Path(path) if path is not None else settings_path()
    settings = ThickLineSettings()
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return settings
    except OSError as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return settings

    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        field_name = _KEY_TO_FIELD.get(key)
        if field_name is None:
            continue
        parsed = _parse_value(key, value.strip())
        if parsed is None:
            logger.debug("Ignoring bad settings line %r", line)
            continue
        setattr(settings, field_name, parsed)
    return settings


def save_settings(settings: ThickLineSettings, path: Optional[PathLike] = None) -> bool:
    """
    Write ``settings`` to ``path`` (default: :func:`settings_path`).

    Returns:
        bool: True if the file was written
    """
    path = Path(path) if path is not None else settings_path()
    lines = [f"{key}={value}" for key, value in settings.to_dict().items()]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)
        return False
    logger.info("Settings saved to: %s", path)
    return True
