"""Generic XML text collection shared by the Office Open XML extractors."""

import re
import xml.etree.ElementTree as ET

from doccompare.domain.exceptions import MalformedContainer

_WHITESPACE_RE = re.compile(r"\s+")


def local_name(tag: str) -> str:
    """Element tag without its '{namespace}' prefix."""
    return tag.rsplit("}", 1)[-1]


def parse_xml(payload: bytes, part_name: str) -> ET.Element:
    """Parse an XML part, mapping parse errors to MalformedContainer."""
    try:
        return ET.fromstring(payload)
    except ET.ParseError as e:
        raise MalformedContainer(f"Invalid XML in {part_name}: {e}") from e


def collect_text(element: ET.Element) -> list[str]:
    """Return every non-blank text node under element, in document order.

    Walks with an explicit stack so nesting depth is not bounded by the
    interpreter's recursion limit. A child's tail is emitted after its subtree.
    """
    parts: list[str] = []
    # (node, closing): closing entries emit the node's tail
    stack: list[tuple[ET.Element, bool]] = [(element, False)]
    while stack:
        node, closing = stack.pop()
        if closing:
            if node.tail and node.tail.strip():
                parts.append(node.tail)
            continue
        if node.text and node.text.strip():
            parts.append(node.text)
        for child in reversed(node):
            stack.append((child, True))
            stack.append((child, False))
    return parts


def join_text(parts: list[str]) -> str:
    """Join text nodes with single spaces, collapsing whitespace runs."""
    return _WHITESPACE_RE.sub(" ", " ".join(parts)).strip()


def element_text(element: ET.Element) -> str:
    """Collected and joined text of one element."""
    return join_text(collect_text(element))
