"""Tests for HistoryEntry."""

from clipkeeper.history.types import HistoryEntry


class TestHistoryEntry:
    """Tests for HistoryEntry construction and display helpers."""

    def test_from_text_counts(self) -> None:
        """from_text() computes character and line counts."""
        entry = HistoryEntry.from_text("a\nb\nc\n", copied_at=10.0)
        assert entry.char_count == 6
        assert entry.line_count == 3
        assert entry.copied_at == 10.0

    def test_line_count_without_trailing_newline(self) -> None:
        """A final unterminated line still counts."""
        assert HistoryEntry.from_text("a\nb").line_count == 2
        assert HistoryEntry.from_text("single").line_count == 1

    def test_preview_short_text_unchanged(self) -> None:
        """Text within the limit is returned as-is."""
        entry = HistoryEntry.from_text("short")
        assert entry.preview(100) == "short"

    def test_preview_truncates_with_ellipsis(self) -> None:
        """Long text is cut to max_length and gets '...'."""
        entry = HistoryEntry.from_text("x" * 150)
        preview = entry.preview()
        assert preview == "x" * 100 + "..."

    def test_preview_exact_length_not_truncated(self) -> None:
        """Text of exactly max_length has no ellipsis."""
        entry = HistoryEntry.from_text("y" * 20)
        assert entry.preview(20) == "y" * 20

    def test_info_is_one_based(self) -> None:
        """info() shows position and size."""
        entry = HistoryEntry.from_text("hello")
        assert entry.info(0) == "1. 5 characters"
        assert entry.info(2) == "3. 5 characters"

    def test_entries_compare_by_fields(self) -> None:
        """Frozen dataclass equality."""
        assert HistoryEntry("a", 1.0, 1, 1) == HistoryEntry("a", 1.0, 1, 1)
