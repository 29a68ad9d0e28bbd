"""webref - references and classification for remote browser automation."""

__version__ = "0.1.0"

from webref.dom import (
    DOMRect,
    NodeKind,
    classify,
    coordinates,
    find_closest,
    in_viewport,
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
from webref.exceptions import (
    InvalidArgumentError,
    NullInputError,
    TypeMismatchError,
    WebDriverError,
)
from webref.reference import (
    ReferenceKind,
    WebElement,
    WebFrame,
    WebReference,
    WebWindow,
    generate_uuid,
)

__all__ = [
    # Version
    "__version__",
    # Classification
    "DOMRect",
    "NodeKind",
    "classify",
    "find_closest",
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
    # Coordinates
    "coordinates",
    "in_viewport",
    # References
    "ReferenceKind",
    "WebElement",
    "WebFrame",
    "WebReference",
    "WebWindow",
    "generate_uuid",
    # Errors
    "InvalidArgumentError",
    "NullInputError",
    "TypeMismatchError",
    "WebDriverError",
]
