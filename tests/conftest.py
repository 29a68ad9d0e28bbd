"""Pytest configuration and fixtures for the webref test suite.

Path Setup:
    The src directory is added to sys.path to enable imports like:
    ``from webref.dom.classifier import is_element``

Shared Fixtures:
    Elements in the XHTML, SVG and XUL namespaces, the same elements inside a
    privileged (system principal) document, and a top-level window with a
    nested frame.
"""

import logging
import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from webref.dom.views import (  # noqa: E402
    SVG_NS,
    XUL_NS,
    Document,
    Element,
    Principal,
    Window,
)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def make_element(local_name, **attrs):
    """Create an XHTML element."""
    return Element(local_name, **attrs)


def make_svg_element(local_name, **attrs):
    """Create an element in the SVG namespace."""
    return Element(local_name, namespace_uri=SVG_NS, **attrs)


def make_xul_element(local_name, **attrs):
    """Create an element in the XUL namespace."""
    return Element(local_name, namespace_uri=XUL_NS, **attrs)


def make_privileged(element):
    """Move ``element`` into a document loaded with the system principal."""
    element.node_principal = Principal(is_system_principal=True)
    element.owner_document = Document(node_principal=element.node_principal)
    return element


# Values that are neither nodes nor windows
GARBAGE = [True, 42, "foo", {}, [], None]


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def dom_el():
    return make_element("p")


@pytest.fixture
def svg_el():
    return make_svg_element("rect")


@pytest.fixture
def xul_el():
    return make_xul_element("text")


@pytest.fixture
def privileged_dom_el():
    return make_privileged(Element("input", namespace_uri=None))


@pytest.fixture
def privileged_xul_el():
    return make_privileged(make_xul_element("text"))


@pytest.fixture
def dom_win():
    return Window()


@pytest.fixture
def dom_frame(dom_win):
    return Window(parent=dom_win)


@pytest.fixture
def fresh_logger():
    """Remove handlers installed by setup_logging before and after a test."""

    def reset():
        logger = logging.getLogger("webref")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        if hasattr(logger, "_webref_configured"):
            del logger._webref_configured
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    reset()
    yield
    reset()
