import pytest

from thicklinepy.cad_types import Vector
from thicklinepy.primitives import Line, Polygon


def test_rectangle_edges_close():
    """Test that polygon edges form a closed loop."""
    rect = Polygon.rectangle((0, 1), (10, 1), (10, -1), (0, -1))
    edges = rect.edges()
    assert len(edges) == 4
    assert edges[-1].end == edges[0].start
    for first, second in zip(edges, edges[1:]):
        assert first.end == second.start


def test_rectangle_three_points():
    """Test the three corners used to rebuild a rectangle."""
    rect = Polygon.rectangle((0, 1), (10, 1), (10, -1), (0, -1))
    p0, p1, p3 = rect.three_point_rectangle()
    assert p0 == Vector(0, 1)
    assert p1 == Vector(10, 1)
    assert p3 == Vector(0, -1)


def test_triangle_has_no_three_point_form():
    """Test that triangles refuse the rectangle shortcut."""
    tri = Polygon.triangle((1, 2), (0, 0), (1, -2))
    with pytest.raises(ValueError):
        tri.three_point_rectangle()


def test_edges_can_be_fixed():
    """Test that edges carry the requested fixed flag."""
    tri = Polygon.triangle((1, 2), (0, 0), (1, -2))
    assert not any(line.fixed for line in tri.edges())
    assert all(line.fixed for line in tri.edges(fixed=True))


def test_vertex_count_is_checked():
    """Test that polygons reject the wrong number of vertices."""
    with pytest.raises(ValueError):
        Polygon("triangle", ((0, 0), (1, 0), (1, 1), (0, 1)))
    with pytest.raises(ValueError):
        Polygon("rectangle", ((0, 0), (1, 0), (1, 1)))


def test_to_json():
    """Test JSON output."""
    tri = Polygon.triangle((1, 2), (0, 0), (1, -2))
    assert tri.to_json() == {
        "kind": "triangle",
        "vertices": [{"x": 1.0, "y": 2.0}, {"x": 0.0, "y": 0.0}, {"x": 1.0, "y": -2.0}],
    }
    assert tri.to_tuples() == [(1.0, 2.0), (0.0, 0.0), (1.0, -2.0)]


def test_line_length():
    """Test line segment length."""
    assert Line((0, 0), (3, 4)).length() == 5.0
    assert not Line((0, 0), (3, 4)).fixed


def test_polygon_is_not_hashable():
    triangle = Polygon.triangle((0, 0), (1, 0), (0, 1))
    with pytest.raises(TypeError):
        hash(triangle)
    with pytest.raises(TypeError):
        {triangle}
