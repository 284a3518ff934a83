"""Tests for byte-range edit application."""

import pytest

from propsguard.utils.text_edits import (
    TextEdit,
    apply_edits,
    apply_text_edits,
    edits_span,
)


class TestTextEdit:
    def test_invalid_range(self):
        with pytest.raises(ValueError):
            TextEdit(5, 2, "x")
        with pytest.raises(ValueError):
            TextEdit(-1, 2, "x")

    def test_insert_is_zero_width(self):
        edit = TextEdit.insert(4, "abc")
        assert (edit.start, edit.end) == (4, 4)

    def test_to_dict(self):
        assert TextEdit(1, 3, "z").to_dict() == {"range": [1, 3], "text": "z"}

    def test_span(self):
        assert edits_span([TextEdit(8, 9, ""), TextEdit(2, 4, "a")]) == (2, 9)
        with pytest.raises(ValueError):
            edits_span([])


class TestApplyEdits:
    def test_order_independent(self):
        source = b"function A({ a }) { return a; }"
        edits = [
            TextEdit.insert(19, " const { a } = props;"),
            TextEdit(11, 16, "props"),
        ]
        expected = b"function A(props) { const { a } = props; return a; }"
        assert apply_edits(source, edits) == expected
        assert apply_edits(source, list(reversed(edits))) == expected

    def test_offsets_are_bytes(self):
        source = "const é = ({ a }) => a;".encode("utf-8")
        start = source.index(b"{")
        end = source.index(b"}") + 1
        assert apply_edits(source, [TextEdit(start, end, "props")]) == "const é = (props) => a;".encode()

    def test_adjacent_edits_allowed(self):
        assert apply_edits(b"abcdef", [TextEdit(0, 2, "X"), TextEdit(2, 4, "Y")]) == b"XYef"

    def test_overlap_rejected(self):
        with pytest.raises(ValueError, match="Overlapping"):
            apply_edits(b"abcdef", [TextEdit(0, 3, "X"), TextEdit(2, 4, "Y")])

    def test_two_inserts_at_same_offset_rejected(self):
        with pytest.raises(ValueError):
            apply_edits(b"abc", [TextEdit.insert(1, "X"), TextEdit.insert(1, "Y")])

    def test_past_end_rejected(self):
        with pytest.raises(ValueError, match="past end"):
            apply_edits(b"abc", [TextEdit(1, 10, "X")])

    def test_no_edits(self):
        assert apply_edits(b"abc", []) == b"abc"

    def test_text_wrapper(self):
        assert apply_text_edits("héllo", [TextEdit(0, 1, "j")]) == "jéllo"
