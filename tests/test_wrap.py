"""Tests for conventio.core.appearance.wrap -- line breaking and truncation."""

from __future__ import annotations

import pytest

from conventio.core.appearance.fonts import text_width
from conventio.core.appearance.wrap import truncate_line, wrap_lines, wrap_text


def _chars(text, size):
    """One point per character, independent of size."""
    return float(len(text))


def test_single_line_fits():
    assert wrap_text("Bonjour", 9, 500, 1) == ["Bonjour"]


def test_twenty_words_in_two_lines_truncated():
    # Five "mot" words are 85.02 pt at 9 pt; six are 102.53 pt
    text = " ".join(["mot"] * 20)
    lines = wrap_text(text, 9, 90, 2)

    assert len(lines) == 2
    assert lines[0] == " ".join(["mot"] * 5)
    assert lines[1] == " ".join(["mot"] * 4) + "..."
    assert text_width(lines[1][:-3], 9) <= 90


def test_empty_text_gives_no_lines():
    assert wrap_text("", 9, 100, 3) == []
    assert wrap_text("   \n\t ", 9, 100, 3) == []
    assert wrap_lines("", 9, 100, 3).truncated is False


def test_invalid_max_lines():
    with pytest.raises(ValueError, match="max_lines"):
        wrap_text("a", 9, 100, 0)


def test_greedy_breaks():
    lines = wrap_text("aa bb cc dd", 9, 5, 4, measure=_chars)
    assert lines == ["aa bb", "cc dd"]


def test_fewer_lines_than_limit_not_truncated():
    result = wrap_lines("aa bb cc", 9, 5, 3, measure=_chars)
    assert result.lines == ["aa bb", "cc"]
    assert result.truncated is False


def test_single_line_fits_all_words():
    assert wrap_text("aa bb cc dd ee", 9, 100, 1, measure=_chars) == ["aa bb cc dd ee"]


def test_one_line_field_drops_overflow():
    result = wrap_lines("aa bb cc dd ee", 9, 5, 1, measure=_chars)
    assert result.lines == ["aa..."]
    assert result.truncated is True


def test_last_line_overflow_truncated():
    result = wrap_lines("aa bb cc dd ee", 9, 5, 2, measure=_chars)
    assert result.lines == ["aa bb", "cc..."]
    assert result.truncated is True


def test_long_text_in_one_line_stays_in_box():
    lines = wrap_text(" ".join(["Formation"] * 80), 9, 480, 1)
    assert len(lines) == 1
    assert text_width(lines[0], 9) <= 480


def test_overlong_first_word_kept_whole():
    lines = wrap_text("abcdefghij kl", 9, 5, 3, measure=_chars)
    assert lines == ["abcdefghij", "kl"]


def test_never_more_than_max_lines():
    text = " ".join(f"w{i}" for i in range(50))
    for n in (1, 2, 3, 5):
        assert len(wrap_text(text, 9, 10, n, measure=_chars)) <= n


@pytest.mark.parametrize(
    "text",
    [
        " ".join(["mot"] * 20),
        "Et : Acme Formation, dont le siège social est situé à 12 rue des Lilas, 75011 Paris",
        "• Alice Bernard, Bruno Petit, Chloé Moreau, David Lefèvre, Émilie Roux, Fabien Girard",
        "Anticonstitutionnellement courte phrase avec un mot interminablementlongsansespace ici",
    ],
)
@pytest.mark.parametrize("max_width", [40, 90, 200, 480])
@pytest.mark.parametrize("max_lines", [1, 2, 3])
def test_lines_fit_width(text, max_width, max_lines):
    result = wrap_lines(text, 9, max_width, max_lines)

    assert len(result.lines) <= max_lines
    for i, line in enumerate(result.lines):
        if result.truncated and i == len(result.lines) - 1:
            assert line.endswith("...")
            line = line[:-3]
        if " " not in line.strip():
            # A single word wider than the box is placed as-is
            continue
        assert text_width(line, 9) <= max_width


def test_wrapping_is_deterministic():
    text = " ".join(["Formation"] * 30)
    assert wrap_lines(text, 9, 120, 2) == wrap_lines(text, 9, 120, 2)


def test_whitespace_collapsed():
    assert wrap_text("  aa \n bb  ", 9, 100, 1, measure=_chars) == ["aa bb"]


def test_forced_word_on_last_line_chopped_not_remeasured():
    # The chopped line can still be wider than the box
    result = wrap_lines("aaaaaaaaaa", 9, 4, 1, measure=_chars)
    assert result.lines == ["aaaaaaa..."]
    assert result.truncated is True
    assert _chars(result.lines[0], 9) > 4


def test_truncate_line_strips_before_marker():
    assert truncate_line("aa bb ccc") == "aa bb..."
    assert truncate_line("abc") == "..."
