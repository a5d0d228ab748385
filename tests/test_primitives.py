"""
Primitive Model Tests

Tests for Point2D, Resolution and Rectangle.
"""

import pytest
from pydantic import ValidationError

from models import Point2D, Rectangle, Resolution


class TestPoint2D:

    def test_as_tuple(self):
        assert Point2D(x=217, y=466).as_tuple == (217.0, 466.0)

    def test_frozen(self):
        point = Point2D(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            point.x = 3.0


class TestResolution:

    def test_str(self):
        assert str(Resolution(width=505, height=606)) == "Resolution(505x606)"

    @pytest.mark.parametrize("width, height", [(0, 606), (505, -1)])
    def test_positive(self, width, height):
        with pytest.raises(ValidationError):
            Resolution(width=width, height=height)


class TestRectangle:

    def test_edges(self):
        rect = Rectangle(x=217.0, y=466.0, width=71.0, height=73.0)
        assert (rect.left, rect.right, rect.top, rect.bottom) == (217.0, 288.0, 466.0, 539.0)

    @pytest.mark.parametrize("width, height", [(0.0, 1.0), (1.0, -2.0)])
    def test_positive_dimensions(self, width, height):
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=width, height=height)

    def test_touching_edges_do_not_overlap(self):
        a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        assert not a.overlaps(Rectangle(x=10.0, y=0.0, width=10.0, height=10.0))
        assert not a.overlaps(Rectangle(x=0.0, y=10.0, width=10.0, height=10.0))
        assert not a.overlaps(Rectangle(x=10.0, y=10.0, width=10.0, height=10.0))

    def test_overlap_is_symmetric(self):
        a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        b = Rectangle(x=9.5, y=9.5, width=10.0, height=10.0)
        assert a.overlaps(b) and b.overlaps(a)

    def test_contained_rectangle_overlaps(self):
        outer = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
        inner = Rectangle(x=40.0, y=40.0, width=5.0, height=5.0)
        assert outer.overlaps(inner) and inner.overlaps(outer)
