"""Web references: opaque handles to elements, windows and frames."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, ClassVar
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, model_serializer

from webref.dom.classifier import classify
from webref.dom.views import NodeKind
from webref.exceptions import InvalidArgumentError
from webref.reference.serializer import (
    ELEMENT_KEY,
    FRAME_KEY,
    IDENTIFIER_PRIORITY,
    WINDOW_KEY,
    find_identifier,
)
from webref.reference.serializer import is_reference as _is_reference

logger = logging.getLogger(__name__)

_MISSING: Any = object()


def generate_uuid() -> str:
    """Generate a fresh identifier for a web reference."""
    return str(uuid4())


class ReferenceKind(str, Enum):
    """Kind of object a web reference points to."""

    ELEMENT = "element"
    WINDOW = "window"
    FRAME = "frame"


class WebReference(BaseModel):
    """A reference to a live element, window or frame.

    References are immutable values: two references are the same handle when
    they are the same variant and carry the same UUID. Use one of the
    ``from_*`` constructors to obtain a concrete variant.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    IDENTIFIER: ClassVar[str | None] = None
    KIND: ClassVar[ReferenceKind | None] = None

    uuid: str

    def __init__(self, uuid: Any = _MISSING, /, **data: Any) -> None:
        if uuid is _MISSING:
            uuid = data.pop('uuid', None)
        if data:
            raise InvalidArgumentError(f'Unexpected web reference fields: {", ".join(sorted(data))}')
        if not isinstance(uuid, str):
            raise InvalidArgumentError(f'Expected web reference UUID to be a string, got {uuid!r}')
        super().__init__(uuid=uuid)

    @model_serializer
    def serialize_reference(self) -> dict[str, str]:
        return {self.IDENTIFIER or 'uuid': self.uuid}

    def is_(self, other: Any) -> bool:
        """Whether ``other`` refers to the same object as this reference."""
        return isinstance(other, WebReference) and type(other) is type(self) and other.uuid == self.uuid

    def to_json(self) -> dict[str, str]:
        """Serialize to the wire representation ``{identifier: uuid}``."""
        if self.IDENTIFIER is None:
            raise NotImplementedError(f'{type(self).__name__} has no wire representation')
        return self.model_dump()

    @classmethod
    def from_node(cls, node: Any, uuid: str | None = None) -> WebReference:
        """Create a reference for a live element, window or frame.

        Args:
            node: The element or browsing context to reference.
            uuid: Stable identifier to use instead of a freshly generated one.

        Raises:
            InvalidArgumentError: if ``node`` is neither an element nor a
                browsing context.
        """
        if uuid is None:
            uuid = generate_uuid()

        kind = classify(node)
        if kind is NodeKind.WINDOW:
            return WebWindow(uuid)
        if kind is NodeKind.FRAME:
            return WebFrame(uuid)
        if kind.is_element:
            return WebElement(uuid)

        logger.debug(f'Cannot create web reference for {node!r} (classified as {kind.value})')
        raise InvalidArgumentError(f'Expected DOM window/frame or element, got: {node!r}')

    @classmethod
    def from_uuid(cls, uuid: str, kind: ReferenceKind | str = ReferenceKind.ELEMENT) -> WebReference:
        """Re-create a previously issued reference whose kind is known."""
        try:
            kind = ReferenceKind(kind)
        except ValueError:
            raise InvalidArgumentError(f'Unknown web reference kind: {kind!r}')
        return _VARIANTS_BY_KIND[kind](uuid)

    @classmethod
    def from_json(cls, payload: Any) -> WebReference:
        """Decode a reference from its wire representation.

        On :class:`WebReference` itself the element, window and frame keys are
        tried in that order. On a concrete variant only its own key is accepted.

        Raises:
            InvalidArgumentError: if ``payload`` is not a mapping or carries
                none of the accepted keys.
        """
        keys = IDENTIFIER_PRIORITY if cls.IDENTIFIER is None else (cls.IDENTIFIER,)
        found = find_identifier(payload, keys)
        if found is None:
            logger.debug(f'Payload is not a {cls.__name__}: {payload!r}')
            raise InvalidArgumentError(f'Expected web reference, got: {payload!r}')

        key, value = found
        return _VARIANTS_BY_KEY[key](value)

    @staticmethod
    def is_reference(v: Any) -> bool:
        """Whether ``v`` carries one of the web reference keys."""
        return _is_reference(v)


class WebElement(WebReference):
    """Reference to a DOM or XUL element."""

    IDENTIFIER: ClassVar[str | None] = ELEMENT_KEY
    KIND: ClassVar[ReferenceKind | None] = ReferenceKind.ELEMENT


class WebWindow(WebReference):
    """Reference to a top-level browsing context."""

    IDENTIFIER: ClassVar[str | None] = WINDOW_KEY
    KIND: ClassVar[ReferenceKind | None] = ReferenceKind.WINDOW


class WebFrame(WebReference):
    """Reference to a nested browsing context."""

    IDENTIFIER: ClassVar[str | None] = FRAME_KEY
    KIND: ClassVar[ReferenceKind | None] = ReferenceKind.FRAME


_VARIANTS_BY_KIND: dict[ReferenceKind, type[WebReference]] = {
    ReferenceKind.ELEMENT: WebElement,
    ReferenceKind.WINDOW: WebWindow,
    ReferenceKind.FRAME: WebFrame,
}

_VARIANTS_BY_KEY: dict[str, type[WebReference]] = {
    variant.IDENTIFIER: variant for variant in _VARIANTS_BY_KIND.values()
}
