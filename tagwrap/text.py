from typing import Iterator

from uniseg.linebreak import line_break_units  # type: ignore
from wcwidth import wcwidth  # type: ignore

from .isolate import isolate


def displayWidth(text: str) -> int:
    width = 0
    for ch in text:
        # Control characters come back as -1, they take up no room on the line.
        width += max(wcwidth(ch), 0)
    return width


class Word:
    def __init__(self, text: str, whitespace: str = "", *, isTag: bool = False) -> None:
        self.text = text
        self.whitespace = whitespace
        self.isTag = isTag
        self.width: int = displayWidth(text)
        self.whitespaceWidth: int = displayWidth(whitespace)

    @staticmethod
    def split(unit: str, *, isTag: bool = False) -> "Word":
        text = unit.rstrip()
        return Word(text, unit[len(text) :], isTag=isTag)

    @property
    def isClosingTag(self) -> bool:
        return self.isTag and self.text[:2] == "</"

    def __str__(self) -> str:
        return self.text + self.whitespace

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return (
            self.text == other.text
            and self.whitespace == other.whitespace
            and self.isTag == other.isTag
        )

    def __repr__(self) -> str:
        return "Word(text={!r}, whitespace={!r}, isTag={})".format(
            self.text, self.whitespace, self.isTag
        )


def findWords(text: str) -> Iterator[Word]:
    for (start, end, isTag) in isolate(text):
        if isTag:
            # Tags are never broken up, no matter how long they are.
            yield Word.split(text[start:end], isTag=True)
        else:
            for unit in line_break_units(text[start:end]):
                if unit:
                    yield Word.split(unit)
