"""DOM node shapes and classification enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from typing_extensions import TypedDict


XHTML_NS = "http://www.w3.org/1999/xhtml"
SVG_NS = "http://www.w3.org/2000/svg"
XUL_NS = "http://www.mozilla.org/keymaster/gatekeeper/there.is.only.xul"


class NodeType(IntEnum):
    """DOM node types based on the DOM specification."""

    ELEMENT_NODE = 1
    DOCUMENT_NODE = 9


class NodeKind(Enum):
    """Closed set of shapes a value can have as far as references are concerned."""

    HTML_ELEMENT = "html"
    SVG_ELEMENT = "svg"
    XUL_ELEMENT = "xul"
    # Element in no namespace or an unrecognised one
    OTHER_ELEMENT = "other"
    WINDOW = "window"
    FRAME = "frame"
    UNKNOWN = "unknown"

    @property
    def is_element(self) -> bool:
        return self in (
            NodeKind.HTML_ELEMENT,
            NodeKind.SVG_ELEMENT,
            NodeKind.XUL_ELEMENT,
            NodeKind.OTHER_ELEMENT,
        )

    @property
    def is_browsing_context(self) -> bool:
        return self in (NodeKind.WINDOW, NodeKind.FRAME)


class Point(TypedDict):
    """2D position coordinates."""
    x: float
    y: float


@dataclass(slots=True)
class DOMRect:
    """Rectangle representing element bounds."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return {"x": self.x + self.width / 2.0, "y": self.y + self.height / 2.0}


@dataclass(slots=True)
class Principal:
    """Security principal of a document."""

    is_system_principal: bool = False


class Window:
    """Browsing context window.

    A window without a parent is a top-level context and reports itself as
    its own parent. A window created with a parent is a nested frame.
    """

    def __init__(
        self,
        parent: Window | None = None,
        inner_width: float = 1280,
        inner_height: float = 720,
    ):
        self._parent = parent
        self.inner_width = inner_width
        self.inner_height = inner_height

    @property
    def self(self) -> Window:
        return self

    @property
    def parent(self) -> Window:
        return self._parent if self._parent is not None else self

    def __repr__(self) -> str:
        kind = "frame" if self._parent is not None else "window"
        return f"<Window {kind} at {id(self):#x}>"


@dataclass(eq=False)
class Document:
    """Owner document of a set of elements."""

    design_mode: str = "off"
    node_principal: Principal = field(default_factory=Principal)
    default_view: Window | None = None
    node_type: int = NodeType.DOCUMENT_NODE


@dataclass(eq=False)
class Element:
    """Live element shape as read by the classifier.

    Identity follows the object, like a live DOM node; two elements with the
    same fields are still different nodes.
    """

    local_name: str
    namespace_uri: str | None = XHTML_NS
    owner_document: Document = field(default_factory=Document, repr=False)
    parent_node: Any = field(default=None, repr=False)
    node_principal: Principal = field(default_factory=Principal, repr=False)
    type: str | None = None
    checked: bool = False
    selected: bool = False
    disabled: bool = False
    read_only: bool = False
    is_content_editable: bool = False
    rect: DOMRect = field(default_factory=lambda: DOMRect(0, 0, 100, 100), repr=False)
    node_type: int = NodeType.ELEMENT_NODE

    def get_bounding_client_rect(self) -> DOMRect:
        return self.rect

