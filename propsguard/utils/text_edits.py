"""Byte-range text edits computed against one immutable source snapshot."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TextEdit:
    """Replace source[start:end] (UTF-8 byte offsets) with replacement."""

    start: int
    end: int
    replacement: str

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit range [{self.start}, {self.end})")

    @classmethod
    def insert(cls, offset: int, text: str) -> "TextEdit":
        return cls(offset, offset, text)

    def to_dict(self) -> dict:
        return {"range": [self.start, self.end], "text": self.replacement}


def edits_span(edits: Iterable[TextEdit]) -> tuple[int, int]:
    """Smallest [start, end) range covering every edit."""
    edits = list(edits)
    if not edits:
        raise ValueError("Cannot compute the span of an empty edit list")
    return min(e.start for e in edits), max(e.end for e in edits)


def _overlaps(a: TextEdit, b: TextEdit) -> bool:
    if a.start == a.end and b.start == b.end:
        return a.start == b.start
    return a.start < b.end and b.start < a.end


def apply_edits(source: bytes, edits: Iterable[TextEdit]) -> bytes:
    """Apply non-overlapping edits to source in a single pass.

    Offsets always refer to the original bytes; no edit ever sees the output
    of another.

    Raises:
        ValueError: if two edits overlap or an edit runs past the end of source
    """
    ordered = sorted(edits, key=lambda e: (e.start, e.end))

    for previous, current in zip(ordered, ordered[1:]):
        if _overlaps(previous, current):
            raise ValueError(
                f"Overlapping edits [{previous.start}, {previous.end}) and "
                f"[{current.start}, {current.end})"
            )

    if ordered and ordered[-1].end > len(source):
        raise ValueError(f"Edit ends at {ordered[-1].end}, past end of source ({len(source)})")

    chunks = []
    cursor = 0
    for edit in ordered:
        chunks.append(source[cursor : edit.start])
        chunks.append(edit.replacement.encode("utf-8"))
        cursor = edit.end
    chunks.append(source[cursor:])

    return b"".join(chunks)


def apply_text_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Convenience wrapper for callers holding a str."""
    return apply_edits(text.encode("utf-8"), edits).decode("utf-8")
