from typing import Iterator, List, Tuple


class TagSection:
    def __init__(self, chunk: str, isTag: bool) -> None:
        self.chunk = chunk
        self.isTag = isTag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagSection):
            return NotImplemented
        return self.chunk == other.chunk and self.isTag == other.isTag

    def __repr__(self) -> str:
        return "TagSection(chunk={!r}, isTag={})".format(self.chunk, self.isTag)


def __scan(text: str, start: int) -> Tuple[int, bool]:
    # Returns the end of the span starting at start, and whether that span is a
    # complete tag. Spans only ever start out as a tag candidate when the very
    # first character is a "<", everything else is text up until the next "<".
    pos = start
    length = len(text)

    inTag = False
    inClosingTag = False
    expectingTagName = False

    while pos < length:
        ch = text[pos]

        if inTag:
            if ch in {">", "=", " "}:
                if expectingTagName:
                    if not inClosingTag:
                        # Only treat this as a tag if somebody bothered to close it
                        # later on, otherwise a stray "<" would swallow text.
                        closingTag = "</" + text[(start + 1) : pos] + ">"
                        if text.find(closingTag, pos) < 0:
                            inTag = False
                            pos += 1
                            continue
                    expectingTagName = False

                if ch == ">":
                    # Swallow all whitespace after the tag so it sticks to the tag.
                    pos += 1
                    while pos < length and text[pos].isspace():
                        pos += 1
                    return (pos, True)
                elif inClosingTag:
                    # Closing tags don't get attributes.
                    inTag = False
            elif ch == "/":
                if pos == start + 1:
                    inClosingTag = True
                elif expectingTagName:
                    inTag = False
            elif expectingTagName and not (ch.isascii() and ch.isalpha()):
                inTag = False
        elif ch == "<":
            if pos == start:
                inTag = True
                expectingTagName = True
            else:
                break

        pos += 1

    return (pos, False)


def isolate(text: str) -> Iterator[Tuple[int, int, bool]]:
    """
    Given a string, yields (start, end, isTag) spans which, taken in order, cover
    the entire string exactly once. Tags are things that look like "<name ...>"
    with a matching "</name>" somewhere later on, or a bare "</name>", along with
    any whitespace directly after them. Anything that fails to look like a tag is
    left as text, and adjacent text spans are merged so text is always maximal.
    """

    pending = 0
    pos = 0

    while pos < len(text):
        end, isTag = __scan(text, pos)
        if end <= pos:
            raise Exception("Logic error, isolation failed to make progress!")

        if isTag:
            if pending < pos:
                yield (pending, pos, False)
            yield (pos, end, True)
            pending = end

        pos = end

    if pending < len(text):
        yield (pending, len(text), False)


def isolateTags(text: str) -> List[TagSection]:
    return [TagSection(text[start:end], isTag) for (start, end, isTag) in isolate(text)]
