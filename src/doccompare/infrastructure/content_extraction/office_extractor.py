"""Extractors for Office Open XML containers (.docx, .xlsx, .pptx).

Each format only decides which XML parts to read; text collection is the
shared walker in xml_text.
"""

import io
import re
import zipfile
from zipfile import BadZipFile

from doccompare.domain.exceptions import MalformedContainer
from doccompare.infrastructure.content_extraction.base import or_sentinel
from doccompare.infrastructure.content_extraction.xml_text import (
    element_text,
    local_name,
    parse_xml,
)

WORD_DOCUMENT_PART = "word/document.xml"
SHARED_STRINGS_PART = "xl/sharedStrings.xml"

DEFAULT_MAX_PART_BYTES = 100 * 1024 * 1024

_SHEET_RE = re.compile(r"^xl/worksheets/sheet(\d+)\.xml$")
_SLIDE_RE = re.compile(r"^ppt/slides/slide(\d+)\.xml$")


def _open_container(data: bytes, kind: str) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except (BadZipFile, ValueError) as e:
        raise MalformedContainer(f"Invalid or corrupted {kind} file: {e}") from e


def _read_part(container: zipfile.ZipFile, name: str, max_part_bytes: int) -> bytes | None:
    """Decompressed part, or None when absent. Parts above max_part_bytes are refused unread."""
    try:
        info = container.getinfo(name)
    except KeyError:
        return None
    # zipfile never yields more than the declared file_size for an entry
    if info.file_size > max_part_bytes:
        raise MalformedContainer(
            f"Part {name} expands to {info.file_size} bytes, above the {max_part_bytes} byte limit"
        )
    try:
        return container.read(info)
    except (BadZipFile, zipfile.LargeZipFile, OSError) as e:
        raise MalformedContainer(f"Cannot read {name}: {e}") from e


def _numbered_parts(container: zipfile.ZipFile, pattern: re.Pattern[str]) -> list[tuple[int, str]]:
    """Part names matching pattern, sorted by their captured number."""
    found: list[tuple[int, str]] = []
    for name in container.namelist():
        match = pattern.match(name)
        if match:
            found.append((int(match.group(1)), name))
    return sorted(found)


def extract_docx_text(data: bytes, max_part_bytes: int = DEFAULT_MAX_PART_BYTES) -> str:
    """Text of the main document part."""
    with _open_container(data, "DOCX") as container:
        payload = _read_part(container, WORD_DOCUMENT_PART, max_part_bytes)
        if payload is None:
            raise MalformedContainer(f"Could not find {WORD_DOCUMENT_PART} in DOCX file")
        root = parse_xml(payload, WORD_DOCUMENT_PART)
    return or_sentinel(element_text(root))


def _shared_strings(payload: bytes) -> list[str]:
    root = parse_xml(payload, SHARED_STRINGS_PART)
    strings: list[str] = []
    for si in root:
        if local_name(si.tag) != "si":
            continue
        text = element_text(si)
        if text:
            strings.append(text)
    return strings


def _sheet_cells(payload: bytes, part_name: str) -> list[str]:
    """Raw cell values: <v> contents and inline <is> strings."""
    root = parse_xml(payload, part_name)
    cells: list[str] = []
    for cell in root.iter():
        if local_name(cell.tag) != "c":
            continue
        for child in cell:
            name = local_name(child.tag)
            if name == "v" and child.text is not None and child.text != "":
                cells.append(child.text)
            elif name == "is":
                text = element_text(child)
                if text:
                    cells.append(text)
    return cells


def extract_xlsx_text(data: bytes, max_part_bytes: int = DEFAULT_MAX_PART_BYTES) -> str:
    """Shared strings first, then one ' | '-joined line of cell values per sheet."""
    with _open_container(data, "XLSX") as container:
        shared = _read_part(container, SHARED_STRINGS_PART, max_part_bytes)
        sheets = _numbered_parts(container, _SHEET_RE)
        if shared is None and not sheets:
            raise MalformedContainer("Could not find worksheet data in XLSX file")
        strings = _shared_strings(shared) if shared is not None else []
        sheet_lines: list[str] = []
        for _, name in sheets:
            payload = _read_part(container, name, max_part_bytes)
            if payload is None:
                continue
            cells = _sheet_cells(payload, name)
            if cells:
                sheet_lines.append(" | ".join(cells))
    parts = [*strings, "\n".join(sheet_lines)]
    return or_sentinel("\n".join(p for p in parts if p))


def extract_pptx_text(data: bytes, max_part_bytes: int = DEFAULT_MAX_PART_BYTES) -> str:
    """Slides in numeric order, each introduced by a '[Slide N]' marker."""
    with _open_container(data, "PPTX") as container:
        slides = _numbered_parts(container, _SLIDE_RE)
        if not slides:
            raise MalformedContainer("Could not find any slides in PPTX file")
        parts: list[str] = []
        for number, name in slides:
            payload = _read_part(container, name, max_part_bytes)
            if payload is None:
                continue
            text = element_text(parse_xml(payload, name))
            if text:
                parts.append(f"[Slide {number}]\n{text}")
    return or_sentinel("\n\n".join(parts))
