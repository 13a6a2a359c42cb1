"""Parsing of number and time lists."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Tuple

# Reference-time layout elements, tried in this order at each position.
_LAYOUT_CHUNKS: Tuple[Tuple[str, str], ...] = (
    ("January", "%B"),
    ("Jan", "%b"),
    ("Monday", "%A"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("2006", "%Y"),
    ("002", "%j"),
    ("01", "%m"),
    ("02", "%d"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
    ("06", "%y"),
    ("15", "%H"),
    ("1", "%m"),
    ("_2", "%d"),
    ("2", "%d"),
    ("3", "%I"),
    ("4", "%M"),
    ("5", "%S"),
    ("PM", "%p"),
    ("pm", "%p"),
    ("Z07:00", "%z"),
    ("Z0700", "%z"),
    ("-07:00", "%z"),
    ("-0700", "%z"),
)


def parse_floats(*args: str) -> List[float]:
    """Parse numbers, ignoring thousands separators and blank entries."""
    output: List[float] = []
    for value in args:
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            continue
        output.append(_parse_float(cleaned))
    return output


def _parse_float(text: str) -> float:
    if "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    try:
        return float(text)
    except ValueError:
        body = text.lstrip("+-")
        if body[:2].lower() == "0x":
            return float.fromhex(text)
        raise


def _fraction_length(layout: str, index: int) -> int:
    if layout[index] not in ".," or index + 1 >= len(layout):
        return 0
    digit = layout[index + 1]
    if digit not in "09":
        return 0
    end = index + 1
    while end < len(layout) and layout[end] == digit:
        end += 1
    if end < len(layout) and layout[end].isdigit():
        return 0
    return end - index - 1


def _layout_to_format(layout: str) -> str:
    parts: List[str] = []
    index = 0
    while index < len(layout):
        fraction = _fraction_length(layout, index)
        if fraction:
            parts.append(layout[index] + "%f")
            index += 1 + fraction
            continue
        for chunk, directive in _LAYOUT_CHUNKS:
            if layout.startswith(chunk, index):
                parts.append(directive)
                index += len(chunk)
                break
        else:
            char = layout[index]
            parts.append("%%" if char == "%" else char)
            index += 1
    return "".join(parts)


def parse_times(layout: str, *args: str) -> List[datetime]:
    """Parse times written in a reference-time layout such as ``2006-01-02``.

    Times without a zone are taken as UTC.
    """
    fmt = _layout_to_format(layout)
    output: List[datetime] = []
    for value in args:
        parsed = datetime.strptime(value, fmt)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        output.append(parsed)
    return output