"""
Plain-text rectangle input and edge/polygon output. Input has one rectangle per line as four numbers
(min_x min_y max_x max_y) separated by whitespace and/or commas. Blank lines and everything after a '#' are ignored.
"""

import re
from typing import Iterable, List, TextIO, Union
from .exceptions import RectFormatError
from .models import Edge, Polygon, Rect

_SEPARATOR = re.compile(r'[\s,]+')


def parse_rects(lines: Iterable[str]) -> List[Rect]:
    rects = []
    for line_no, line in enumerate(lines, start=1):
        content = line.split('#', 1)[0].strip()
        if not content:
            continue
        fields = _SEPARATOR.split(content)
        if len(fields) != 4:
            raise RectFormatError(line_no, line.rstrip('\n'), f'expected 4 numbers, got {len(fields)}')
        try:
            min_x, min_y, max_x, max_y = (float(f) for f in fields)
        except ValueError as e:
            raise RectFormatError(line_no, line.rstrip('\n'), str(e)) from e
        rects.append(Rect(min_x, min_y, max_x, max_y))
    return rects


def read_rects(source: Union[str, TextIO]) -> List[Rect]:
    """Reads rectangles from a file path or an open text stream."""
    if isinstance(source, str):
        with open(source) as f:
            return parse_rects(f)
    return parse_rects(source)


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float. Integral values drop the trailing '.0'."""
    text = repr(float(value))
    return text[:-2] if text.endswith('.0') else text


def format_edges(edges: Iterable[Edge]) -> str:
    """One edge per line: x1 y1 x2 y2"""
    return ''.join(' '.join(format_number(v) for v in (e.start.x, e.start.y, e.end.x, e.end.y)) + '\n'
                   for e in edges)


def format_polygons(polygons: Iterable[Polygon]) -> str:
    """One polygon per line: x1 y1 x2 y2 ... xn yn"""
    return ''.join(' '.join(f'{format_number(p.x)} {format_number(p.y)}' for p in polygon) + '\n'
                   for polygon in polygons)
