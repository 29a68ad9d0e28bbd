"""Tests for the coordinate resolver.

Validates ``coordinates`` (rectangle center, verbatim offsets, argument
validation) and ``in_viewport``.
"""

import pytest

from conftest import make_element
from webref.dom.coordinates import bounding_rect, coordinates, in_viewport
from webref.dom.views import Document, DOMRect, Window
from webref.exceptions import InvalidArgumentError, NullInputError, TypeMismatchError, WebDriverError


class RectNode:
    """Node whose bounding rectangle is a plain mapping."""

    def __init__(self, rect):
        self._rect = rect

    def get_bounding_client_rect(self):
        return self._rect


class TestCoordinates:
    """Tests for coordinates."""

    def test_returns_numeric_point(self, dom_el):
        p = coordinates(dom_el)
        assert set(p) == {"x", "y"}
        assert isinstance(p["x"], float)
        assert isinstance(p["y"], float)

    def test_center_of_rectangle(self, dom_el):
        assert coordinates(dom_el) == {"x": 50, "y": 50}

    def test_center_of_offset_rectangle(self):
        el = make_element("div", rect=DOMRect(x=20, y=40, width=60, height=10))
        assert coordinates(el) == {"x": 50, "y": 45}

    def test_offsets_are_returned_verbatim(self, dom_el):
        assert coordinates(dom_el, 10, 10) == {"x": 10, "y": 10}
        assert coordinates(dom_el, -5, -5) == {"x": -5, "y": -5}
        assert coordinates(dom_el, 0, 0) == {"x": 0, "y": 0}
        assert coordinates(dom_el, 1.5, 2.5) == {"x": 1.5, "y": 2.5}

    def test_offsets_ignore_rectangle_position(self):
        el = make_element("div", rect=DOMRect(x=300, y=300, width=10, height=10))
        assert coordinates(el, 10, 10) == {"x": 10, "y": 10}

    def test_single_offset_falls_back_to_center(self, dom_el):
        assert coordinates(dom_el, 10) == {"x": 10, "y": 50}
        assert coordinates(dom_el, None, 10) == {"x": 50, "y": 10}

    def test_mapping_rectangle(self):
        node = RectNode({"left": 10, "top": 20, "width": 40, "height": 20})
        assert coordinates(node) == {"x": 30, "y": 30}

    def test_null_node(self):
        with pytest.raises(NullInputError, match="node is null"):
            coordinates(None)

    @pytest.mark.parametrize(
        "x_offset,y_offset",
        [
            ("string", None),
            (None, "string"),
            ("string", "string"),
            ({}, None),
            (None, {}),
            ({}, {}),
            ([], None),
            (None, []),
            ([], []),
            (True, 0),
        ],
    )
    def test_non_numeric_offsets(self, dom_el, x_offset, y_offset):
        with pytest.raises(TypeMismatchError, match="Offset must be a number"):
            coordinates(dom_el, x_offset, y_offset)

    @pytest.mark.parametrize("node", [Window(), Document(), object()])
    def test_node_without_rectangle(self, node):
        with pytest.raises(InvalidArgumentError, match="bounding rectangle"):
            coordinates(node)

    def test_errors_are_protocol_errors(self, dom_el):
        with pytest.raises(TypeError):
            coordinates(dom_el, "string")
        with pytest.raises(WebDriverError):
            coordinates(None)


class TestBoundingRect:
    """Tests for bounding_rect."""

    def test_dom_rect_passthrough(self, dom_el):
        assert bounding_rect(dom_el) is dom_el.rect

    def test_mapping_with_x_y(self):
        rect = bounding_rect(RectNode({"x": 1, "y": 2, "width": 3, "height": 4}))
        assert rect == DOMRect(1, 2, 3, 4)


class TestInViewport:
    """Tests for in_viewport."""

    def make_el(self, rect, window):
        return make_element("div", rect=rect, owner_document=Document(default_view=window))

    def test_inside(self):
        el = self.make_el(DOMRect(10, 10, 100, 100), Window(inner_width=800, inner_height=600))
        assert in_viewport(el)

    def test_outside(self):
        el = self.make_el(DOMRect(900, 10, 100, 100), Window(inner_width=800, inner_height=600))
        assert not in_viewport(el)

    def test_offsets(self):
        el = self.make_el(DOMRect(0, 0, 100, 100), Window(inner_width=800, inner_height=600))
        assert in_viewport(el, 800, 600)
        assert not in_viewport(el, -1, 10)

    def test_without_window(self, dom_el):
        assert not in_viewport(dom_el)
