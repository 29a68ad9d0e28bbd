"""Interaction point computation for elements."""

import logging
from collections.abc import Mapping
from typing import Any

from webref.dom.views import DOMRect, Point
from webref.exceptions import InvalidArgumentError, NullInputError, TypeMismatchError

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_offset(offset: Any) -> None:
    if offset is not None and not _is_number(offset):
        raise TypeMismatchError(f"Offset must be a number, got {type(offset).__name__}")


def _rect_field(rect: Any, *names: str) -> float:
    for name in names:
        if isinstance(rect, Mapping):
            value = rect.get(name)
        else:
            value = getattr(rect, name, None)
        if _is_number(value):
            return float(value)
    return 0.0


def bounding_rect(node: Any) -> DOMRect:
    """Get the bounding client rectangle of ``node`` as a :class:`DOMRect`.

    Accepts rectangles exposing either ``x``/``y`` or ``left``/``top``.

    Raises:
        InvalidArgumentError: if ``node`` has no bounding rectangle.
    """
    get_rect = getattr(node, "get_bounding_client_rect", None)
    if not callable(get_rect):
        raise InvalidArgumentError(f"Expected an element with a bounding rectangle, got: {node!r}")
    rect = get_rect()
    if isinstance(rect, DOMRect):
        return rect
    return DOMRect(
        x=_rect_field(rect, "x", "left"),
        y=_rect_field(rect, "y", "top"),
        width=_rect_field(rect, "width"),
        height=_rect_field(rect, "height"),
    )


def coordinates(node: Any, x_offset: Any = None, y_offset: Any = None) -> Point:
    """Compute the point to interact with ``node`` at.

    Without offsets this is the center of the node's bounding rectangle.
    Offsets are taken as the target point as-is; an axis without an offset
    falls back to the center on that axis.

    Raises:
        NullInputError: if ``node`` is ``None``.
        TypeMismatchError: if an offset is given and is not a number.
        InvalidArgumentError: if ``node`` has no bounding rectangle.
    """
    if node is None:
        raise NullInputError("node is null")

    _check_offset(x_offset)
    _check_offset(y_offset)

    if x_offset is not None and y_offset is not None:
        return {"x": x_offset, "y": y_offset}

    center = bounding_rect(node).center
    return {
        "x": x_offset if x_offset is not None else center["x"],
        "y": y_offset if y_offset is not None else center["y"],
    }


def in_viewport(node: Any, x_offset: Any = None, y_offset: Any = None) -> bool:
    """Whether the interaction point of ``node`` lies inside its window's viewport."""
    point = coordinates(node, x_offset, y_offset)

    document = getattr(node, "owner_document", None)
    window = getattr(document, "default_view", None)
    if window is None:
        logger.debug(f"No window reachable from {node!r}, treating it as outside the viewport")
        return False

    width = getattr(window, "inner_width", 0)
    height = getattr(window, "inner_height", 0)
    return 0 <= point["x"] <= width and 0 <= point["y"] <= height
