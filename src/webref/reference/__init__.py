"""Web references and their wire representation."""

from .serializer import ELEMENT_KEY, FRAME_KEY, IDENTIFIER_PRIORITY, WINDOW_KEY, is_reference
from .views import (
    ReferenceKind,
    WebElement,
    WebFrame,
    WebReference,
    WebWindow,
    generate_uuid,
)

__all__ = [
    "ELEMENT_KEY",
    "FRAME_KEY",
    "IDENTIFIER_PRIORITY",
    "WINDOW_KEY",
    "is_reference",
    "ReferenceKind",
    "WebElement",
    "WebFrame",
    "WebReference",
    "WebWindow",
    "generate_uuid",
]
