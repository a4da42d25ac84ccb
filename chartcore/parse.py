"""Parsing of number and time lists."""

from __future__ import annotations

from datetime import datetime, timezone

# Reference-layout chunks and their strptime directives, longest first.
_CHUNKS: list[tuple[str, str]] = sorted(
    [
        ("January", "%B"),
        ("Jan", "%b"),
        ("Monday", "%A"),
        ("Mon", "%a"),
        ("MST", "%Z"),
        ("2006", "%Y"),
        ("01", "%m"),
        ("02", "%d"),
        ("03", "%I"),
        ("04", "%M"),
        ("05", "%S"),
        ("06", "%y"),
        ("15", "%H"),
        ("1", "%m"),
        ("2", "%d"),
        ("3", "%I"),
        ("4", "%M"),
        ("5", "%S"),
        ("PM", "%p"),
        ("pm", "%p"),
        ("Z07:00:00", "%z"),
        ("-07:00:00", "%z"),
        ("Z070000", "%z"),
        ("-070000", "%z"),
        ("Z07:00", "%z"),
        ("-07:00", "%z"),
        ("Z0700", "%z"),
        ("-0700", "%z"),
        ("Z07", "%z"),
        ("-07", "%z"),
    ],
    key=lambda chunk: len(chunk[0]),
    reverse=True,
)


def _fraction_length(layout: str, index: int) -> int:
    """Length of a fractional-seconds chunk such as '.000' at ``index``, or 0."""
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
    return end - index


def _layout_to_strptime(layout: str) -> str:
    parts: list[str] = []
    index = 0
    while index < len(layout):
        fraction = _fraction_length(layout, index)
        if fraction:
            parts.append(layout[index] + "%f")
            index += fraction
            continue
        for chunk, directive in _CHUNKS:
            if layout.startswith(chunk, index):
                parts.append(directive)
                index += len(chunk)
                break
        else:
            char = layout[index]
            parts.append("%%" if char == "%" else char)
            index += 1
    return "".join(parts)


def parse_floats(*args: str) -> list[float]:
    """Parse numbers, ignoring thousands separators and blank entries."""
    output: list[float] = []
    for value in args:
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            continue
        if "_" in cleaned:
            raise ValueError(f"invalid float: {value!r}")
        output.append(float(cleaned))
    return output


def parse_times(layout: str, *args: str) -> list[datetime]:
    """Parse times written in a reference layout ("2006-01-02 15:04:05").

    Times without a zone come back in UTC.
    """
    pattern = _layout_to_strptime(layout)
    output: list[datetime] = []
    for value in args:
        parsed = datetime.strptime(value, pattern)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        output.append(parsed)
    return output