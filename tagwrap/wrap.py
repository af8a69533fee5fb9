import math
import struct
import sys
from typing import List, Optional, Sequence

from .optimal import LineWidthError, Penalties, breakWords, checkLineWidths
from .text import Word, findWords


def single(value: float) -> float:
    # Widths are worked out in single precision, so that values like 15 * 2.1
    # land on the same side of .5 as they do for the renderer.
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def effectiveWidth(baseLineWidth: int, lineWidthMultiplier: float) -> int:
    scaled = single(single(float(baseLineWidth)) * single(lineWidthMultiplier))
    if not math.isfinite(scaled):
        raise LineWidthError(
            f"Line width {baseLineWidth} * {lineWidthMultiplier} is not a number!"
        )

    # Round half away from zero, and never go below zero.
    width = max(int(math.floor(scaled + 0.5)), 0)
    if width <= 0:
        raise LineWidthError(
            f"Line width {baseLineWidth} * {lineWidthMultiplier} rounds to nothing!"
        )
    return width


def render(line: Sequence[Word]) -> str:
    if not line:
        return ""

    # Whitespace that a line was broken on doesn't get displayed.
    return "".join(str(word) for word in line[:-1]) + line[-1].text


def wrapLines(
    text: str,
    lineWidths: Sequence[float],
    penalties: Optional[Penalties] = None,
) -> List[str]:
    """
    Given a text string which may contain inline markup tags such as <b> or
    <size=16>, and a list of widths for each line, returns the text broken into
    lines. Tags don't count towards the width of a line and are never split
    from the text they sit next to. Embedded newlines are always honored, and
    every paragraph between them starts over at the first line width. Lines are
    picked to be as even as possible over the whole paragraph, rather than
    greedily filling each line up in turn.
    """

    checkLineWidths(lineWidths)

    outLines: List[str] = []
    for paragraph in text.split("\n"):
        if paragraph[-1:] == "\r":
            paragraph = paragraph[:-1]

        words = list(findWords(paragraph))
        if "".join(str(word) for word in words) != paragraph:
            raise Exception("Logic error, words don't add back up to the original text!")

        for line in breakWords(words, lineWidths, penalties):
            outLines.append(render(line))

    return outLines


def wrapText(text: str, baseLineWidth: int, lineWidthMultiplier: float) -> List[str]:
    return wrapLines(text, [effectiveWidth(baseLineWidth, lineWidthMultiplier)])


if __name__ == "__main__":
    # Quick sanity check, the real tests live in tests/.
    def verify(
        text: str,
        width: int,
        expectedLines: List[str],
        *,
        multiplier: float = 1.0,
    ) -> None:
        actualLines = wrapText(text, width, multiplier)

        assert (
            actualLines == expectedLines
        ), f"Expected lines {expectedLines} but got lines {actualLines}"

    # Empty.
    verify("", 10, [""])

    # Fits within space, trailing space strip.
    verify("hello world", 80, ["hello world"])
    verify("hello world  ", 80, ["hello world"])

    # Handles newlines explicitly.
    verify("123\n45", 15, ["123", "45"])
    verify("123\n\n45", 15, ["123", "", "45"])
    verify("123\r\n45", 15, ["123", "45"])

    # Wraps in expected spot.
    verify("aaa bbb ccc", 7, ["aaa bbb", "ccc"])
    verify("aaa bbb ccc", 5, ["aaa bbb", "ccc"], multiplier=1.4)

    # Prefers evenness over greediness.
    verify("aaa bb cc ddddd", 6, ["aaa", "bb cc", "ddddd"])

    # Doesn't break long words.
    verify("a verylongword b", 5, ["a", "verylongword", "b"])

    # Tags take no room and stick to their text.
    verify("The <b>quick</b> fox", 10, ["The <b>quick</b>", "fox"])
    verify("aaa bbb <i>ccc</i>", 7, ["aaa bbb", "<i>ccc</i>"])
    verify("<b><i>aaa bbb</i></b> ccc", 7, ["<b><i>aaa bbb</i></b>", "ccc"])
    verify("<size=16>aaa bbb</size>", 7, ["<size=16>aaa bbb</size>"])

    # Things that only look like tags are text.
    verify("1 < 2", 80, ["1 < 2"])

    # Hey we did it!
    print("Passed", file=sys.stderr)
