from __future__ import annotations

from marlin_post.address import INTEGER_FORMAT, GCodeLetter

COMMENT_MARKER = ";"
PROGRAM_DELIMITER = "%"


def single_line(text) -> str:
    """Free text on one program line, line breaks would start a new block"""
    return " ".join(str(text).splitlines())


def format_comment(text: str) -> str:
    # Grouping parentheses are comments on most other controllers
    text = single_line(text).replace("(", "").replace(")", "").strip()
    if not text:
        return COMMENT_MARKER
    return f"{COMMENT_MARKER} {text}"


class BlockWriter:
    """
    Collects the program one line at a time.

    A block is built from words, empty words (suppressed by their modal channel)
    are dropped and a block with no words left is not written at all. When
    numbering is enabled every written block is prefixed with N<sequence number>
    and only written blocks advance the counter.
    """

    def __init__(
        self,
        separator: str = " ",
        sequence_number_start: int | None = None,
        sequence_number_increment: int = 1,
    ):
        self.separator = separator
        self.sequence_number = sequence_number_start
        self.sequence_number_increment = sequence_number_increment
        self.lines: list[str] = []
        self._number_format = INTEGER_FORMAT.with_letter(GCodeLetter.BlockNumber)

    @property
    def numbering(self) -> bool:
        return self.sequence_number is not None

    def write_block(self, *words: str) -> bool:
        words = [word for word in words if word]
        if not words:
            return False

        if self.numbering:
            words.insert(0, self._number_format.format(self.sequence_number))
            self.sequence_number += self.sequence_number_increment

        self.lines.append(self.separator.join(words))
        return True

    def write_comment(self, text: str) -> None:
        self.lines.append(format_comment(text))

    def write_line(self, line: str) -> None:
        """Write a line as is, without numbering"""
        self.lines.append(line)

    def write_blank(self) -> None:
        self.lines.append("")

    def to_gcode(self) -> str:
        return "\n".join(self.lines) + "\n"
