"""
Modal words remain in effect on the controller until they are replaced, so repeating them is
redundant. Each emitted word class (X, Y, Z, F, S and every G modal group) gets a channel that
remembers the last word it emitted:

- unknown: nothing emitted yet (or reset) - the next value is always emitted
- known(word): a value is emitted only if its formatted word differs from ``word``

Forced channels emit on every request. Reference channels (I, J, K) are offsets recomputed per
arc and are never suppressed.
"""
from __future__ import annotations

from marlin_post.address import WordFormat
from marlin_post.groups import GCodeGroup


class ModalChannel:
    word_format: WordFormat | None
    force: bool

    def __init__(self, word_format: WordFormat | None = None, force=False):
        self.word_format = word_format
        self.force = force
        self._last: str | None = None

    @property
    def known(self) -> bool:
        return self._last is not None

    @property
    def last(self) -> str | None:
        return self._last

    def format(self, value) -> str:
        """Return the word for ``value`` or an empty string if it is suppressed"""
        if value is None:
            return ""

        word = self._to_word(value)
        if self.force or word != self._last:
            self._last = word
            return word
        return ""

    def reset(self) -> None:
        self._last = None

    def _to_word(self, value) -> str:
        return self.word_format.format(value)


class ModalGroup(ModalChannel):
    """Channel for one G-code modal group, values are ``GCodeGroup`` members"""

    def _to_word(self, value: GCodeGroup) -> str:
        return str(value)


class ReferenceChannel(ModalChannel):
    def format(self, value) -> str:
        if value is None:
            return ""
        return self._to_word(value)
