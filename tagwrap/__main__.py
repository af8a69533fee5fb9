import argparse
import sys
from typing import List, Optional

from .optimal import LineWidthError
from .wrap import wrapLines, wrapText


def parseWidths(value: str) -> List[int]:
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid line width list {value!r}")


def main(
    text: str,
    width: int,
    multiplier: float,
    widths: Optional[List[int]],
    separator: str,
) -> int:
    try:
        if widths is not None:
            lines = wrapLines(text, widths)
        else:
            lines = wrapText(text, width, multiplier)
    except LineWidthError as e:
        print(f"Cannot wrap text: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(separator.join(lines) + "\n")
    return 0


def cli(args: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Wrap text containing inline markup tags into lines"
    )

    parser.add_argument(
        "--width",
        default=80,
        type=int,
        help="Base line width, defaults to 80",
    )
    parser.add_argument(
        "--multiplier",
        default=1.0,
        type=float,
        help="Multiplier applied to the base line width, defaults to 1.0",
    )
    parser.add_argument(
        "--widths",
        default=None,
        type=parseWidths,
        help="Comma separated list of widths for each line, overrides --width",
    )
    parser.add_argument(
        "--separator",
        default="\n",
        type=str,
        help="String to place between output lines, defaults to a newline",
    )
    parser.add_argument(
        "text",
        metavar="TEXT",
        nargs="?",
        type=str,
        default=None,
        help="Text to wrap, read from stdin if not provided",
    )
    parsed = parser.parse_args(args)

    text = parsed.text
    if text is None:
        text = sys.stdin.read()
        # Don't turn the newline at the end of piped input into an empty line.
        if text[-1:] == "\n":
            text = text[:-1]

    sys.exit(
        main(
            text,
            parsed.width,
            parsed.multiplier,
            parsed.widths,
            parsed.separator,
        )
    )


if __name__ == "__main__":
    cli()
