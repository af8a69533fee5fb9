import time

import pytest

from tagwrap import (
    LineWidthError,
    Penalties,
    Word,
    breakWords,
    findWords,
    restoreTags,
    stripTags,
    wrapOptimalFit,
)


def texts(lines):
    return [[str(word) for word in line] for line in lines]


def test_optimal_fit_single_line():
    words = list(findWords("aaa bbb"))
    assert texts(wrapOptimalFit(words, [80])) == [["aaa ", "bbb"]]


def test_optimal_fit_empty():
    assert wrapOptimalFit([], [10]) == [[]]


def test_optimal_fit_is_not_greedy():
    # Greedy would give "aaa bb" / "cc" / "ddddd".
    words = list(findWords("aaa bb cc ddddd"))
    assert texts(wrapOptimalFit(words, [6])) == [["aaa "], ["bb ", "cc "], ["ddddd"]]


def test_optimal_fit_overlong_word_gets_own_line():
    words = list(findWords("a verylongword b"))
    assert texts(wrapOptimalFit(words, [5])) == [["a "], ["verylongword "], ["b"]]


def test_optimal_fit_uses_last_width_for_extra_lines():
    words = list(findWords("aaa bbb ccc ddd"))
    assert texts(wrapOptimalFit(words, [7, 3])) == [
        ["aaa ", "bbb "],
        ["ccc "],
        ["ddd"],
    ]


def test_optimal_fit_per_line_widths():
    words = list(findWords("aaa bbb ccc ddd"))
    assert texts(wrapOptimalFit(words, [3, 11])) == [["aaa "], ["bbb ", "ccc ", "ddd"]]


def test_optimal_fit_custom_penalties():
    words = list(findWords("aaaa bbbb c"))
    assert texts(wrapOptimalFit(words, [10])) == [["aaaa ", "bbbb "], ["c"]]

    # Make a lone short word on the last line expensive enough to avoid.
    penalties = Penalties(shortLastLinePenalty=100)
    assert texts(wrapOptimalFit(words, [10], penalties)) == [
        ["aaaa "],
        ["bbbb ", "c"],
    ]


def test_optimal_fit_rejects_bad_widths():
    words = list(findWords("aaa"))
    with pytest.raises(LineWidthError):
        wrapOptimalFit(words, [])
    with pytest.raises(LineWidthError):
        wrapOptimalFit(words, [0])
    with pytest.raises(LineWidthError):
        wrapOptimalFit(words, [10, -1])
    with pytest.raises(LineWidthError):
        wrapOptimalFit(words, [float("nan")])


def test_strip_tags_records_positions():
    words = list(findWords("The <b>quick</b> fox"))
    clean, removed = stripTags(words)
    assert removed == [1, 3]
    assert [word.text for word in clean] == ["The", "quick", "fox"]
    # The space swallowed by </b> still counts after "quick".
    assert clean[1].whitespace == " "
    assert clean[1].whitespaceWidth == 1


def test_strip_tags_without_tags():
    words = list(findWords("no tags here"))
    clean, removed = stripTags(words)
    assert removed == []
    assert clean == words


def test_restore_tags_inside_line():
    words = list(findWords("aaa <b>bbb</b> ccc"))
    clean, removed = stripTags(words)
    cleanLines = [clean[:2], clean[2:]]
    assert texts(restoreTags(words, removed, cleanLines)) == [
        ["aaa ", "<b>", "bbb", "</b> "],
        ["ccc"],
    ]


def test_restore_tags_opening_tag_at_break_moves_down():
    words = list(findWords("aaa bbb <i>ccc</i>"))
    clean, removed = stripTags(words)
    cleanLines = [clean[:2], clean[2:]]
    assert texts(restoreTags(words, removed, cleanLines)) == [
        ["aaa ", "bbb "],
        ["<i>", "ccc", "</i>"],
    ]


def test_restore_tags_closing_tags_at_break_stay_up():
    words = list(findWords("<b><i>aaa bbb</i></b> <u>ccc</u>"))
    clean, removed = stripTags(words)
    cleanLines = [clean[:2], clean[2:]]
    assert texts(restoreTags(words, removed, cleanLines)) == [
        ["<b>", "<i>", "aaa ", "bbb", "</i>", "</b> "],
        ["<u>", "ccc", "</u>"],
    ]


def test_restore_tags_last_line_takes_the_rest():
    words = [
        Word("aaa", " "),
        Word("bbb"),
        Word("<b>", isTag=True),
        Word("</b>", isTag=True),
    ]
    clean, removed = stripTags(words)
    assert texts(restoreTags(words, removed, [clean])) == [
        ["aaa ", "bbb", "<b>", "</b>"]
    ]


def test_restore_tags_only_tags():
    words = list(findWords("<b></b>"))
    clean, removed = stripTags(words)
    assert clean == []
    assert texts(restoreTags(words, removed, [[]])) == [["<b>", "</b>"]]


def test_restore_tags_detects_overrun():
    words = [Word("aaa", " "), Word("bbb")]
    with pytest.raises(Exception, match="Logic error"):
        restoreTags(words, [], [words + words, []])


def test_break_words_ignores_tag_width():
    # Counting the tags, "<size=16>aaa bbb</size>" is far wider than 7.
    words = list(findWords("<size=16>aaa bbb</size> ccc"))
    assert texts(breakWords(words, [7])) == [
        ["<size=16>", "aaa ", "bbb", "</size> "],
        ["ccc"],
    ]


def test_break_words_covers_every_word_once():
    text = "<b>Lorem ipsum</b> dolor <i>sit amet</i>, consectetur <u>adipiscing</u> elit"
    words = list(findWords(text))
    for width in range(1, 30):
        lines = breakWords(words, [width])
        flattened = [word for line in lines for word in line]
        assert len(flattened) == len(words)
        assert all(a is b for a, b in zip(flattened, words))


def test_optimal_fit_long_paragraph_is_fast():
    words = list(findWords(" ".join(["word"] * 4000)))
    start = time.monotonic()
    lines = wrapOptimalFit(words, [40])
    assert time.monotonic() - start < 2.0
    assert len(lines) == 500
    assert all(len(line) == 8 for line in lines)
