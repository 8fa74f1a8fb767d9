"""SVG parsing and serialization.

Parsing goes through defusedxml so entity expansion and external entity
tricks are rejected. The tree is built with comments and processing
instructions kept, and the namespace prefixes and DOCTYPE seen in the input
are recorded so serialization can reproduce them.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any
from xml.etree.ElementTree import Element, ElementTree, TreeBuilder
from xml.etree.ElementTree import indent as _indent
from xml.etree.ElementTree import register_namespace as _register_namespace

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from svg_invert.exceptions import SVGParseError, SVGWriteError

logger = logging.getLogger(__name__)

SVG_NAMESPACES = {
    "": "http://www.w3.org/2000/svg",
    "xlink": "http://www.w3.org/1999/xlink",
}

_BOM = "\ufeff"


@dataclass
class SVGDocument:
    """A parsed SVG document plus the prolog details ElementTree drops."""

    tree: ElementTree
    xml_declaration: bool = False
    doctype: str | None = None
    namespaces: dict[str, str] = field(default_factory=dict)

    def getroot(self) -> Element:
        return self.tree.getroot()


class _DocumentTarget:
    """Parser target that records namespaces and DOCTYPE while building the tree."""

    def __init__(self) -> None:
        self._builder = TreeBuilder(insert_comments=True, insert_pis=True)
        self.namespaces: dict[str, str] = {}
        self.doctype_decl: str | None = None

    def start(self, tag: str, attrib: dict[str, str]) -> Element:
        return self._builder.start(tag, attrib)

    def end(self, tag: str) -> Element:
        return self._builder.end(tag)

    def data(self, data: str) -> None:
        self._builder.data(data)

    def comment(self, text: str) -> Element:
        return self._builder.comment(text)

    def pi(self, target: str, text: str | None = None) -> Element:
        return self._builder.pi(target, text)

    def start_ns(self, prefix: str, uri: str) -> None:
        self.namespaces.setdefault(prefix, uri)

    def doctype(self, name: str, pubid: str | None, system: str | None) -> None:
        if pubid:
            self.doctype_decl = f'<!DOCTYPE {name} PUBLIC "{pubid}" "{system}">'
        elif system:
            self.doctype_decl = f'<!DOCTYPE {name} SYSTEM "{system}">'
        else:
            self.doctype_decl = f"<!DOCTYPE {name}>"

    def close(self) -> Element:
        return self._builder.close()


def parse_svg(source: str | Path | IO[Any]) -> SVGDocument:
    """Parse an SVG file or stream.

    Args:
        source: Path to an SVG file, or a binary/text file-like object.

    Returns:
        Parsed SVGDocument

    Raises:
        SVGParseError: If the input is not well-formed XML
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        return _parse_data(path.read_bytes(), str(path))

    name = getattr(source, "name", None)
    return _parse_data(source.read(), str(name) if name is not None else None)


def parse_svg_string(svg_content: str | bytes) -> SVGDocument:
    """Parse SVG markup held in memory."""
    return _parse_data(svg_content, None)


def _has_xml_declaration(data: str | bytes) -> bool:
    if isinstance(data, bytes):
        return data.lstrip(b"\xef\xbb\xbf \t\r\n").startswith(b"<?xml")
    return data.lstrip(_BOM + " \t\r\n").startswith("<?xml")


def _parse_data(data: str | bytes, source: str | None) -> SVGDocument:
    target = _DocumentTarget()
    stream: IO[Any] = io.BytesIO(data) if isinstance(data, bytes) else io.StringIO(data)

    try:
        tree = ET.parse(stream, parser=ET.XMLParser(target=target))
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}", source=source) from e
    except DefusedXmlException as e:
        raise SVGParseError(f"Refused to parse SVG: {e}", source=source) from e

    logger.debug("Parsed SVG from %s (namespaces: %s)", source or "<memory>", target.namespaces)
    return SVGDocument(
        tree=tree,
        xml_declaration=_has_xml_declaration(data),
        doctype=target.doctype_decl,
        namespaces=target.namespaces,
    )


def register_namespaces(namespaces: dict[str, str] | None = None) -> None:
    """Register SVG namespaces plus any found in the input document.

    ElementTree keeps a single process-wide prefix map, so registrations
    outlive this call and apply to every later serialization. Each URI
    keeps only the prefix registered last. The document's prefixed
    declarations therefore go after the built-in ones, and its default
    namespace goes last, so a URI declared both as ``xmlns`` and under a
    prefix is written as the default namespace.
    """
    declared = namespaces or {}
    ordered = list(SVG_NAMESPACES.items())
    ordered += [(prefix, uri) for prefix, uri in declared.items() if prefix]
    ordered += [(prefix, uri) for prefix, uri in declared.items() if not prefix]
    for prefix, uri in ordered:
        try:
            _register_namespace(prefix, uri)
        except ValueError:
            # ns0, ns1... are reserved by ElementTree; it generates its own.
            logger.debug("Skipping reserved namespace prefix %r", prefix)


def serialize_svg(document: SVGDocument, indent: bool = False) -> bytes:
    """Serialize a document to UTF-8 bytes."""
    register_namespaces(document.namespaces)
    if indent:
        _indent(document.tree)

    buffer = io.BytesIO()
    if document.xml_declaration:
        buffer.write(b'<?xml version="1.0" encoding="UTF-8"?>\n')
    if document.doctype:
        buffer.write(document.doctype.encode("utf-8") + b"\n")
    document.tree.write(buffer, encoding="utf-8", xml_declaration=False)
    return buffer.getvalue()


def write_svg(
    document: SVGDocument,
    target: str | Path | IO[Any],
    indent: bool = False,
) -> None:
    """Serialize a document and write it to a path or stream.

    The document is serialized in full before anything is written.

    Raises:
        SVGWriteError: If the target cannot be written
    """
    data = serialize_svg(document, indent=indent)

    try:
        if isinstance(target, (str, Path)):
            Path(target).write_bytes(data)
        elif isinstance(target, io.TextIOBase):
            target.write(data.decode("utf-8"))
            target.flush()
        else:
            target.write(data)
            if hasattr(target, "flush"):
                target.flush()
    except (OSError, ValueError) as e:
        raise SVGWriteError(f"Failed to write SVG: {e}", {"target": str(getattr(target, "name", target))}) from e
