"""
2D geometric primitives emitted by the thick line engine.

These classes represent closed outlines in sketch space. Vertex order is
part of the output contract: the same input always yields the same order.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Tuple

from .cad_types import Vector, VectorLike, as_vector

PolygonKind = Literal["rectangle", "triangle"]


class Line:
    """A 2D line segment in sketch coordinates."""

    def __init__(self, start: VectorLike, end: VectorLike, fixed: bool = False):
        self.start = as_vector(start)
        self.end = as_vector(end)
        self.fixed = fixed  # fixed lines cannot be dragged by the host

    def length(self) -> float:
        return (self.end - self.start).length()

    def __repr__(self):
        return f"Line(start={self.start.to_tuple()}, end={self.end.to_tuple()})"


@dataclass(frozen=True)
class Polygon:
    """A closed polygon; the last vertex connects back to the first."""

    # compare with ==; Vector fields are mutable numpy arrays
    __hash__ = None

    kind: PolygonKind
    vertices: Tuple[Vector, ...]

    def __post_init__(self):
        if self.kind not in ("rectangle", "triangle"):
            raise ValueError(f"Unknown polygon kind '{self.kind}'")
        expected = 4 if self.kind == "rectangle" else 3
        if len(self.vertices) != expected:
            raise ValueError(
                f"A {self.kind} needs {expected} vertices, got {len(self.vertices)}"
            )
        object.__setattr__(
            self, "vertices", tuple(as_vector(v) for v in self.vertices)
        )

    @classmethod
    def rectangle(
        cls, p0: VectorLike, p1: VectorLike, p2: VectorLike, p3: VectorLike
    ) -> "Polygon":
        return cls("rectangle", (p0, p1, p2, p3))

    @classmethod
    def triangle(cls, p0: VectorLike, p1: VectorLike, p2: VectorLike) -> "Polygon":
        return cls("triangle", (p0, p1, p2))

    def edges(self, fixed: bool = False) -> List[Line]:
        n = len(self.vertices)
        return [
            Line(self.vertices[i], self.vertices[(i + 1) % n], fixed=fixed)
            for i in range(n)
        ]

    def three_point_rectangle(self) -> Tuple[Vector, Vector, Vector]:
        """
        The three corners a host needs to rebuild this rectangle.

        Returns ``(p0, p1, p3)``: the first corner, its neighbour along the
        first edge and its neighbour along the last edge. The fourth corner
        is implied.
        """
        if self.kind != "rectangle":
            raise ValueError("Only rectangles can be described by three points")
        return self.vertices[0], self.vertices[1], self.vertices[3]

    def to_tuples(self) -> List[Tuple[float, float]]:
        return [v.to_tuple() for v in self.vertices]

    def to_json(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "vertices": [v.to_json() for v in self.vertices],
        }
