"""
XML document helpers.

Files are parsed into / written from ``xml.etree.ElementTree`` trees; mapping
elements to domain objects happens in ``addressbook.repositories``.
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

from .exceptions import DataConversionError
from .files import CHARSET, is_file_exists

INDENT = "    "


def get_data_from_file(path: Path, root_tag: str) -> ElementTree.Element:
    """
    Parse ``path`` and return its root element.

    Raises FileNotFoundError when the file does not exist and
    DataConversionError when the content is not well-formed XML or the root
    element is not ``root_tag``.
    """
    if not is_file_exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    try:
        tree = ElementTree.parse(path)
    except ElementTree.ParseError as exc:
        raise DataConversionError(exc) from exc
    root = tree.getroot()
    if root.tag != root_tag:
        raise DataConversionError(
            ValueError(f"unexpected root element <{root.tag}>, expected <{root_tag}>")
        )
    return root


def save_data_to_file(path: Path, root: ElementTree.Element) -> None:
    """Write ``root`` to an existing file as indented UTF-8 XML."""
    if not is_file_exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    tree = ElementTree.ElementTree(root)
    ElementTree.indent(tree, space=INDENT)
    tree.write(path, encoding=CHARSET, xml_declaration=True)
