"""Classification predicates over live DOM nodes and browsing contexts.

Every predicate in this module is total: it accepts any value and answers
``False`` (or ``None``) for input it does not recognise, so callers can use
them as filters over heterogeneous collections.
"""

import logging
from collections.abc import Mapping
from typing import Any

from webref.dom.views import SVG_NS, XHTML_NS, XUL_NS, NodeKind, NodeType

logger = logging.getLogger(__name__)

# Input types that are mutable form controls per the HTML standard
MUTABLE_INPUT_TYPES = frozenset(
    {
        "color",
        "date",
        "datetime-local",
        "email",
        "file",
        "month",
        "number",
        "password",
        "range",
        "search",
        "tel",
        "text",
        "url",
        "week",
    }
)

# Input types that carry a text value the user can type into
EDITABLE_INPUT_TYPES = frozenset(
    {
        "date",
        "datetime-local",
        "email",
        "month",
        "number",
        "password",
        "search",
        "tel",
        "text",
        "time",
        "url",
        "week",
    }
)

READ_ONLY_CAPABLE = frozenset({"input", "textarea"})
FORM_CONTROLS = frozenset({"button", "input", "select", "textarea"})
OPTION_LIKE = frozenset({"option", "optgroup"})

# Boolean content attributes per element; "hidden" and "itemscope" are global
BOOLEAN_ATTRIBUTES: dict[str, frozenset[str]] = {
    "audio": frozenset({"autoplay", "controls", "loop", "muted"}),
    "button": frozenset({"autofocus", "disabled", "formnovalidate"}),
    "details": frozenset({"open"}),
    "dialog": frozenset({"open"}),
    "fieldset": frozenset({"disabled"}),
    "form": frozenset({"novalidate"}),
    "iframe": frozenset({"allowfullscreen"}),
    "img": frozenset({"ismap"}),
    "input": frozenset(
        {"autofocus", "checked", "disabled", "formnovalidate", "multiple", "readonly", "required"}
    ),
    "menuitem": frozenset({"checked", "default", "disabled"}),
    "ol": frozenset({"reversed"}),
    "optgroup": frozenset({"disabled"}),
    "option": frozenset({"disabled", "selected"}),
    "script": frozenset({"async", "defer"}),
    "select": frozenset({"autofocus", "disabled", "multiple", "required"}),
    "textarea": frozenset({"autofocus", "disabled", "readonly", "required"}),
    "track": frozenset({"default"}),
    "video": frozenset({"autoplay", "controls", "loop", "muted"}),
}
GLOBAL_BOOLEAN_ATTRIBUTES = frozenset({"hidden", "itemscope"})


def _get(obj: Any, name: str, default: Any = None) -> Any:
    """Read an attribute without letting the node's accessors raise."""
    if obj is None or isinstance(obj, (bool, int, float, str, bytes, Mapping, list, tuple)):
        return default
    try:
        return getattr(obj, name, default)
    except Exception:
        return default


def _local_name(node: Any) -> str | None:
    name = _get(node, "local_name")
    if isinstance(name, str):
        return name
    tag_name = _get(node, "tag_name")
    if isinstance(tag_name, str):
        return tag_name.lower()
    return None


def _input_type(node: Any) -> str:
    typ = _get(node, "type")
    if not isinstance(typ, str) or not typ:
        return "text"
    return typ.lower()


def classify(v: Any) -> NodeKind:
    """Return the kind of ``v``.

    This is the single dispatch point all other predicates build on.
    """
    node_type = _get(v, "node_type")
    if not isinstance(node_type, bool) and node_type == NodeType.ELEMENT_NODE:
        namespace = _get(v, "namespace_uri")
        if namespace == XUL_NS:
            return NodeKind.XUL_ELEMENT
        if namespace == SVG_NS:
            return NodeKind.SVG_ELEMENT
        if namespace == XHTML_NS:
            return NodeKind.HTML_ELEMENT
        return NodeKind.OTHER_ELEMENT

    if _get(v, "self") is v:
        parent = _get(v, "parent")
        if parent is None:
            return NodeKind.UNKNOWN
        return NodeKind.WINDOW if parent is v else NodeKind.FRAME

    return NodeKind.UNKNOWN


def is_element(v: Any) -> bool:
    """Whether ``v`` is an element node, regardless of namespace."""
    return classify(v).is_element


def is_dom_element(v: Any) -> bool:
    """Whether ``v`` is an element that is not a XUL element.

    Elements in privileged documents still count as DOM elements.
    """
    kind = classify(v)
    return kind.is_element and kind is not NodeKind.XUL_ELEMENT


def is_xul_element(v: Any) -> bool:
    return classify(v) is NodeKind.XUL_ELEMENT


def is_dom_window(v: Any) -> bool:
    """Whether ``v`` is a browsing context, either top-level or nested."""
    return classify(v).is_browsing_context


def is_in_privileged_document(v: Any) -> bool:
    principal = _get(v, "node_principal")
    return _get(principal, "is_system_principal") is True


def find_closest(node: Any, selector: str) -> Any:
    """Find the closest node matching ``selector``, starting at ``node``.

    ``selector`` is a comma-separated list of tag names. The ancestor chain is
    followed through ``parent_node`` up to the owning document; ``None`` is
    returned when nothing matches or ``selector`` is not a string.
    """
    if not isinstance(selector, str):
        return None

    tags = {tag.strip() for tag in selector.split(",") if tag.strip()}
    seen: set[int] = set()
    current = node
    while current is not None and id(current) not in seen:
        if _get(current, "node_type") == NodeType.DOCUMENT_NODE:
            return None
        seen.add(id(current))
        if _local_name(current) in tags:
            return current
        current = _get(current, "parent_node")
    if current is not None:
        logger.debug(f"Ancestor chain of {node!r} loops back on itself")
    return None


def is_selected(v: Any) -> bool:
    """Selectedness of an ``<option>`` or a checkbox/radio ``<input>``."""
    if not is_dom_element(v):
        return False
    name = _local_name(v)
    if name == "option":
        return _get(v, "selected") is True
    if name == "input" and _input_type(v) in ("checkbox", "radio"):
        return _get(v, "checked") is True
    return False


def is_read_only(v: Any) -> bool:
    if not is_dom_element(v):
        return False
    return _local_name(v) in READ_ONLY_CAPABLE and _get(v, "read_only") is True


def is_disabled(v: Any) -> bool:
    """Whether ``v`` is a disabled form control.

    ``<option>`` and ``<optgroup>`` also inherit disabledness from any
    ``<optgroup>`` or ``<select>`` ancestor. Enabling an outer ancestor does
    not re-enable a node whose nearer ancestor is disabled.
    """
    if not is_dom_element(v):
        return False

    name = _local_name(v)
    if name in FORM_CONTROLS:
        return _get(v, "disabled") is True
    if name not in OPTION_LIKE:
        return False

    if _get(v, "disabled") is True:
        return True

    seen = {id(v)}
    ancestor = _get(v, "parent_node")
    while is_dom_element(ancestor) and id(ancestor) not in seen:
        seen.add(id(ancestor))
        ancestor_name = _local_name(ancestor)
        if ancestor_name in ("optgroup", "select") and _get(ancestor, "disabled") is True:
            return True
        if ancestor_name == "select":
            break
        ancestor = _get(ancestor, "parent_node")
    return False


def is_editing_host(v: Any) -> bool:
    """Whether ``v`` is content-editable or lives in a design-mode document."""
    if not is_dom_element(v):
        return False
    if _get(v, "is_content_editable") is True:
        return True
    document = _get(v, "owner_document")
    return _get(document, "design_mode") == "on"


def is_editable(v: Any) -> bool:
    if not is_dom_element(v):
        return False
    if is_read_only(v) or is_disabled(v):
        return False

    name = _local_name(v)
    if name == "input" and _input_type(v) in EDITABLE_INPUT_TYPES:
        return True
    if name == "textarea":
        return True
    return is_editing_host(v)


def is_mutable_form_control(v: Any) -> bool:
    """Whether ``v`` is a ``<textarea>`` or ``<input>`` whose value can change.

    Unlike :func:`is_editable`, editing hosts are not form controls.
    """
    if not is_dom_element(v):
        return False
    if is_read_only(v) or is_disabled(v):
        return False

    name = _local_name(v)
    if name == "textarea":
        return True
    if name != "input":
        return False
    return _input_type(v) in MUTABLE_INPUT_TYPES


def is_boolean_attribute(v: Any, attr: str) -> bool:
    """Whether ``attr`` is a boolean content attribute of element ``v``."""
    if not is_dom_element(v) or not isinstance(attr, str):
        return False
    name = _local_name(v)
    if name is None:
        return False

    # custom elements carry a hyphen and opt out of the global attributes
    if attr in GLOBAL_BOOLEAN_ATTRIBUTES and "-" not in name:
        return True
    return attr in BOOLEAN_ATTRIBUTES.get(name, frozenset())
