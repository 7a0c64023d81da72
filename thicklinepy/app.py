import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .cad_types import VectorLike
from .constants import ERROR_BOX_COLOR
from .geometry import ThickLineInput
from .pipeline import ThickLineResult, derive_and_validate
from .primitives import Line
from .settings import PathLike, ThickLineSettings, load_settings, save_settings
from .sketch2d import Sketch2D, draw_shapes

logger = logging.getLogger(__name__)


def format_error(message: str) -> str:
    """Markup for an error message shown in a rich text box."""
    return f"<font color='{ERROR_BOX_COLOR}'>Error: {message}</font>"


def minimum_feature_width(line_width: float) -> float:
    """Smallest feature width a UI should accept for ``line_width``."""
    return max(line_width, 0.0)


class ThickLineCommand:
    """
    Host-side driver for the thick line engine.

    The command owns no UI state. Every call receives the two endpoints and
    any field overrides, builds a fresh input snapshot on top of the stored
    settings and runs the whole pipeline.
    """

    def __init__(self, sketch: Sketch2D, settings_file: Optional[PathLike] = None):
        self.sketch = sketch
        self.settings_file = Path(settings_file) if settings_file is not None else None
        self._last_result: Optional[ThickLineResult] = None
        self.result_changed = False
        self._lines: List[Line] = []

    @property
    def last_result(self) -> Optional[ThickLineResult]:
        return self._last_result

    def defaults(self) -> ThickLineSettings:
        """Settings from the last successful run, or the built-in defaults."""
        return load_settings(self.settings_file)

    def _settings(self, overrides: Any) -> ThickLineSettings:
        return replace(self.defaults(), **overrides)

    def _run(
        self, a: VectorLike, b: VectorLike, overrides: Any
    ) -> Tuple[Optional[ThickLineInput], ThickLineResult]:
        thick_line = None
        try:
            thick_line = self._settings(overrides).to_input(a, b)
        except ValueError as e:
            result = ThickLineResult.failure(str(e))
        else:
            result = derive_and_validate(thick_line)
        self.result_changed = result != self._last_result
        self._last_result = result
        return thick_line, result

    def preview(self, a: VectorLike, b: VectorLike, **overrides: Any) -> ThickLineResult:
        """
        Validate the current inputs without drawing or saving anything.

        ``result_changed`` is set when the outcome differs from the previous
        call, so a host only needs to refresh its error display then.
        """
        return self._run(a, b, overrides)[1]

    def execute(self, a: VectorLike, b: VectorLike, **overrides: Any) -> ThickLineResult:
        """
        Build the thick line, draw it on the sketch and remember the settings.

        Nothing is drawn or saved if the inputs are invalid.
        """
        thick_line, result = self._run(a, b, overrides)
        if not result.ok:
            logger.warning("[ThickLine] Command failed: %s", result.error)
            return result

        self._lines = draw_shapes(self.sketch, result.shapes)
        logger.info(
            "[ThickLine] Drew %d polygons (%d lines)",
            len(result.shapes.polygons()),
            len(self._lines),
        )
        save_settings(ThickLineSettings.from_input(thick_line), self.settings_file)
        return result

    @property
    def lines(self) -> List[Line]:
        """Lines added to the sketch by the last successful :meth:`execute`."""
        return list(self._lines)
