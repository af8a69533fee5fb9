from .isolate import TagSection, isolate, isolateTags
from .optimal import (
    LineWidthError,
    Penalties,
    breakWords,
    restoreTags,
    stripTags,
    wrapOptimalFit,
)
from .text import Word, displayWidth, findWords
from .wrap import wrapLines, wrapText


__all__ = [
    "LineWidthError",
    "Penalties",
    "TagSection",
    "Word",
    "breakWords",
    "displayWidth",
    "findWords",
    "isolate",
    "isolateTags",
    "restoreTags",
    "stripTags",
    "wrapLines",
    "wrapOptimalFit",
    "wrapText",
]
