import math
from typing import List, Optional, Sequence, Tuple

from .text import Word


class LineWidthError(Exception):
    pass


class Penalties:
    def __init__(
        self,
        *,
        nlinePenalty: float = 1000,
        overflowPenalty: float = 50 * 50,
        shortLastLineFraction: float = 4,
        shortLastLinePenalty: float = 25,
    ) -> None:
        # Every line costs this much, so fewer lines are preferred.
        self.nlinePenalty = nlinePenalty
        # Per-column cost of a lone word that doesn't fit on its line.
        self.overflowPenalty = overflowPenalty
        # A last line made of a single word shorter than width / fraction gets
        # the short last line penalty, to avoid orphaned words.
        self.shortLastLineFraction = shortLastLineFraction
        self.shortLastLinePenalty = shortLastLinePenalty


def checkLineWidths(lineWidths: Sequence[float]) -> None:
    if not lineWidths:
        raise LineWidthError("At least one line width must be provided!")
    for width in lineWidths:
        if not math.isfinite(width) or width <= 0:
            raise LineWidthError(f"Line width {width} must be a positive number!")


def wrapOptimalFit(
    words: Sequence[Word],
    lineWidths: Sequence[float],
    penalties: Optional[Penalties] = None,
) -> List[List[Word]]:
    """
    Given a list of words and a list of line widths, breaks the words into lines
    such that the total cost of all lines is as small as possible. This looks at
    the whole paragraph at once instead of filling lines greedily, so an earlier
    line may be left shorter in order to avoid a very ragged line later on. The
    last line width is reused for any lines beyond the end of lineWidths. Lines
    with more than one word never overflow their width, but a single word that
    can't fit anywhere gets a line to itself.
    """

    checkLineWidths(lineWidths)
    penalties = penalties or Penalties()

    count = len(words)
    defaultWidth = lineWidths[-1]
    widestLine = max(max(lineWidths), 1.0)

    # Running total of widths, so the width of any run of words is a subtraction.
    offsets: List[float] = [0.0]
    for word in words:
        offsets.append(offsets[-1] + word.width + word.whitespaceWidth)

    # For every position, the cheapest way of breaking right before it, as the
    # position of the previous break, the total cost and the number of lines.
    best: List[Tuple[int, float, int]] = [(0, 0.0, 0)]

    for j in range(1, count + 1):
        choice: Tuple[int, float, int] = (0, math.inf, 0)

        # Walk backwards so lines only get wider, and stop once a line of several
        # words can no longer fit on even the widest line.
        for i in range(j - 1, -1, -1):
            # Trailing whitespace on the last word doesn't take up room.
            lineWidth = offsets[j] - offsets[i] - words[j - 1].whitespaceWidth
            if j - i > 1 and lineWidth > widestLine:
                break

            _, previousCost, lineNumber = best[i]
            if math.isinf(previousCost):
                continue

            if lineNumber < len(lineWidths):
                target = max(lineWidths[lineNumber], 1.0)
            else:
                target = max(defaultWidth, 1.0)

            cost = previousCost + penalties.nlinePenalty

            if lineWidth > target:
                if j - i > 1:
                    # Never overflow a line that could have been broken.
                    continue
                cost += (lineWidth - target) * penalties.overflowPenalty
            elif j < count:
                gap = target - lineWidth
                cost += gap * gap
            elif (
                i + 1 == j
                and lineWidth < target / penalties.shortLastLineFraction
            ):
                cost += penalties.shortLastLinePenalty

            # Ties go to the earliest break, same as a forward scan would pick.
            if cost <= choice[1]:
                choice = (i, cost, lineNumber + 1)

        if math.isinf(choice[1]):
            raise Exception(f"Logic error, no way to break words before position {j}!")
        best.append(choice)

    # Now, walk backwards from the end collecting the chosen lines.
    lines: List[List[Word]] = []
    pos = count
    while True:
        previous = best[pos][0]
        lines.append(list(words[previous:pos]))
        pos = previous
        if pos == 0:
            break

    lines.reverse()
    return lines


def stripTags(words: Sequence[Word]) -> Tuple[List[Word], List[int]]:
    # Pull all of the tags out so that they have no influence on where lines are
    # broken. We remember where each one was so they can be put back afterwards.
    clean: List[Word] = []
    removed: List[int] = []

    for i, word in enumerate(words):
        if word.isTag:
            removed.append(i)
            if clean and word.whitespace:
                # The tag swallowed the space after the previous word, but that
                # space is still visible so it still has to be counted.
                previous = clean[-1]
                clean[-1] = Word(previous.text, previous.whitespace + word.whitespace)
            continue
        clean.append(word)

    return (clean, removed)


def restoreTags(
    words: Sequence[Word],
    removed: Sequence[int],
    cleanLines: Sequence[Sequence[Word]],
) -> List[List[Word]]:
    # Map lines of the clean word list back onto the original word list. Tags that
    # landed inside a line stay there. Tags sitting right on a break go with the
    # following line, unless they are closing tags in which case they stay on the
    # line with the text they close.
    lines: List[List[Word]] = []
    start = 0
    removedIndex = 0

    for lineNo, cleanLine in enumerate(cleanLines):
        if lineNo == len(cleanLines) - 1:
            # Last line gets everything left over, so nothing gets dropped.
            end = len(words)
        else:
            end = start
            taken = 0
            while taken < len(cleanLine):
                if end >= len(words):
                    raise Exception("Logic error, clean lines overran the word list!")
                if removedIndex < len(removed) and removed[removedIndex] == end:
                    removedIndex += 1
                else:
                    taken += 1
                end += 1

            while (
                removedIndex < len(removed)
                and removed[removedIndex] == end
                and words[end].isClosingTag
            ):
                removedIndex += 1
                end += 1

        lines.append(list(words[start:end]))
        start = end

    if start != len(words):
        raise Exception("Logic error, restored lines don't cover every word!")
    return lines


def breakWords(
    words: Sequence[Word],
    lineWidths: Sequence[float],
    penalties: Optional[Penalties] = None,
) -> List[List[Word]]:
    clean, removed = stripTags(words)
    if not removed:
        # Nothing to put back, so no need for remapping.
        return wrapOptimalFit(words, lineWidths, penalties)

    cleanLines = wrapOptimalFit(clean, lineWidths, penalties)
    return restoreTags(words, removed, cleanLines)
