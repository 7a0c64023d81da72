"""
Sketch2D module - The drawing surface thick line shapes are materialised on.

A host CAD application implements :class:`Sketch2D` on top of its own sketch
object. :class:`MemorySketch2D` keeps the lines in memory and can render them,
which is enough for previews, the command line tool and tests.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .cad_types import VectorLike, as_vector
from .emitter import ThickLineShapes
from .primitives import Line, Polygon


class Sketch2D(ABC):
    """
    Abstract base class for a 2D sketch that accepts fixed line primitives.

    Only the two constructions the thick line command needs are required.
    """

    @abstractmethod
    def add_three_point_rectangle(
        self, p0: VectorLike, p1: VectorLike, p3: VectorLike
    ) -> List[Line]:
        """
        Add a fixed rectangle given three of its corners.

        Args:
            p0: A corner
            p1: The corner adjacent to ``p0`` along the first side
            p3: The corner adjacent to ``p0`` along the other side

        Returns:
            The four sketch lines of the rectangle
        """
        ...

    @abstractmethod
    def add_triangle(self, a: VectorLike, b: VectorLike, c: VectorLike) -> List[Line]:
        """Add a fixed closed triangle a -> b -> c -> a."""
        ...


class MemorySketch2D(Sketch2D):
    """A sketch that records its lines in a list."""

    def __init__(self):
        self._primitives: List[Line] = []

    @property
    def primitives(self) -> List[Line]:
        return list(self._primitives)

    def _add_polygon(self, polygon: Polygon) -> List[Line]:
        lines = polygon.edges(fixed=True)
        self._primitives.extend(lines)
        return lines

    def add_three_point_rectangle(
        self, p0: VectorLike, p1: VectorLike, p3: VectorLike
    ) -> List[Line]:
        p0, p1, p3 = as_vector(p0), as_vector(p1), as_vector(p3)
        p2 = p1 + (p3 - p0)
        return self._add_polygon(Polygon.rectangle(p0, p1, p2, p3))

    def add_triangle(self, a: VectorLike, b: VectorLike, c: VectorLike) -> List[Line]:
        return self._add_polygon(Polygon.triangle(a, b, c))

    def to_png(
        self,
        file_name: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        margin: float = 0.1,
    ) -> None:
        """
        Render the sketch to a PNG image.

        Args:
            file_name: Path to save the PNG file. If None, displays in a UI window instead.
            width: Image width in pixels (default: 800)
            height: Image height in pixels (default: 600)
            margin: Margin around the sketch as a fraction of size (default: 0.1)

        Raises:
            ValueError: If the sketch has no lines
        """
        if not self._primitives:
            raise ValueError("No sketch lines available for rendering")

        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
        ax.set_aspect("equal")

        xs = []
        ys = []
        for line in self._primitives:
            ax.plot([line.start.x, line.end.x], [line.start.y, line.end.y], "k-", linewidth=2)
            xs.extend([line.start.x, line.end.x])
            ys.extend([line.start.y, line.end.y])

        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        x_range = max(max_x - min_x, 1)
        y_range = max(max_y - min_y, 1)
        ax.set_xlim(min_x - x_range * margin, max_x + x_range * margin)
        ax.set_ylim(min_y - y_range * margin, max_y + y_range * margin)

        ax.grid(True, alpha=0.3)
        ax.set_xlabel("X")
        ax.set_ylabel("Y")
        ax.set_title("Thick Line")

        plt.tight_layout()
        if file_name:
            plt.savefig(file_name, dpi=100, bbox_inches="tight", facecolor="white")
            plt.close(fig)
        else:
            plt.show()


def _draw_polygon(sketch: Sketch2D, polygon: Polygon) -> List[Line]:
    if polygon.kind == "rectangle":
        return sketch.add_three_point_rectangle(*polygon.three_point_rectangle())
    return sketch.add_triangle(*polygon.vertices)


def draw_shapes(sketch: Sketch2D, shapes: ThickLineShapes) -> List[Line]:
    """Materialise the body and end features on ``sketch``, body first."""
    lines: List[Line] = []
    for polygon in shapes.polygons():
        lines.extend(_draw_polygon(sketch, polygon))
    return lines
