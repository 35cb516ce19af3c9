"""
Segment I/O

Reads the segment sequence out of the image's path styles, and
reads/writes the line-oriented segment file.

Segment file format:
  - One segment per line, two letters: color symbol then width symbol (e.g. "AB")
  - Blank lines are ignored
  - Order of lines is the segment order

Style extraction:
  - Every <path> element in document order, any namespace
  - style="...; stroke: rgb(...); stroke-width: N; ..."
  - stroke and stroke-width are looked up in the registry style tables
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence, Tuple, Union

from .core.registry import param_registry
from .kernel import Segment

PathLike = Union[str, Path]


def parse_style(style: str) -> Tuple[str, str]:
    """
    Map one path's style attribute to its (color, width) symbols.

    Args:
        style: Raw CSS declaration list, e.g. "fill:none;stroke:rgb(51, 85, 51);stroke-width:5".

    Returns:
        (color, width) symbols from the registry style tables.

    Raises:
        StyleError: If stroke or stroke-width is repeated, missing, or not in its table.
    """
    registry = param_registry()
    color_styles = registry["color_styles"]
    width_styles = registry["width_styles"]

    color, width = None, None
    for decl in style.split(";"):
        decl = decl.strip()
        if not decl:
            continue

        name, sep, value = decl.partition(":")
        if not sep:
            raise StyleError(f"Malformed style declaration: {decl!r}")
        name, value = name.strip(), value.strip()

        if name == "stroke":
            if color is not None:
                raise StyleError("invalid state, color already set")
            if value not in color_styles:
                raise StyleError(f"Unknown stroke color: {value!r}")
            color = color_styles[value]
        elif name == "stroke-width":
            if width is not None:
                raise StyleError("invalid state, width already set")
            if value not in width_styles:
                raise StyleError(f"Unknown stroke width: {value!r}")
            width = width_styles[value]

    if color is None or width is None:
        raise StyleError(f"Style lacks stroke or stroke-width: {style!r}")

    return color, width


def extract_segments_from_svg(path: PathLike) -> list[Segment]:
    """
    Read the segments of an image, one per <path>, in document order.

    Raises:
        StyleError: If a path has no style attribute or an unusable style.
        xml.etree.ElementTree.ParseError: If the file is not well-formed XML.
    """
    root = ET.parse(path).getroot()

    segments = []
    for i, elem in enumerate(e for e in root.iter() if _local_name(e.tag) == "path"):
        style = elem.get("style")
        if style is None:
            raise StyleError(f"Path {i} has no style attribute")
        try:
            segments.append(Segment(*parse_style(style)))
        except StyleError as e:
            raise StyleError(f"Path {i}: {e}") from e

    return segments


def read_segments(path: PathLike) -> list[Segment]:
    """
    Read a segment file.

    Raises:
        SegmentFormatError: If a non-blank line is not exactly two characters.
    """
    segments = []
    with open(path, 'r') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            if len(line) != 2:
                raise SegmentFormatError(
                    f"Line {lineno}: expected 2 symbols (color, width), got {line!r}"
                )
            segments.append(Segment(line[0], line[1]))
    return segments


def write_segments(segments: Sequence[Tuple[str, str]], path: PathLike) -> None:
    """Write one "<color><width>" line per segment."""
    with open(path, 'w') as f:
        for color, width in segments:
            f.write(f"{color}{width}\n")


def _local_name(tag) -> str:
    # "{http://www.w3.org/2000/svg}path" -> "path"; comments have non-str tags
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


class StyleError(Exception):
    """Raised when a path style cannot be mapped to a segment."""
    pass


class SegmentFormatError(Exception):
    """Raised when a segment file line is malformed."""
    pass
