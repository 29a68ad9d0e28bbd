"""DOM node classification and interaction points."""

from .classifier import (
    EDITABLE_INPUT_TYPES,
    MUTABLE_INPUT_TYPES,
    classify,
    find_closest,
    is_boolean_attribute,
    is_disabled,
    is_dom_element,
    is_dom_window,
    is_editable,
    is_editing_host,
    is_element,
    is_in_privileged_document,
    is_mutable_form_control,
    is_read_only,
    is_selected,
    is_xul_element,
)
from .coordinates import coordinates, in_viewport
from .views import (
    SVG_NS,
    XHTML_NS,
    XUL_NS,
    Document,
    DOMRect,
    Element,
    NodeKind,
    NodeType,
    Point,
    Principal,
    Window,
)

__all__ = [
    "EDITABLE_INPUT_TYPES",
    "MUTABLE_INPUT_TYPES",
    "classify",
    "coordinates",
    "find_closest",
    "in_viewport",
    "is_boolean_attribute",
    "is_disabled",
    "is_dom_element",
    "is_dom_window",
    "is_editable",
    "is_editing_host",
    "is_element",
    "is_in_privileged_document",
    "is_mutable_form_control",
    "is_read_only",
    "is_selected",
    "is_xul_element",
    "SVG_NS",
    "XHTML_NS",
    "XUL_NS",
    "Document",
    "DOMRect",
    "Element",
    "NodeKind",
    "NodeType",
    "Point",
    "Principal",
    "Window",
]
