"""Substitution fuzzers: one character swapped for a lookalike or neighbour."""

from typing import Iterator

from .. import constants
from .base import BaseFuzzer


class BitsquattingFuzzer(BaseFuzzer):
    """Single bit-flip errors that still land in the hostname alphabet."""

    def __init__(self):
        super().__init__(
            name="bitsquatting",
            description="Flip each bit of each character, keeping results in [a-z0-9-]"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i, ch in enumerate(label):
            code = ord(ch)
            for bit in range(8):
                flipped = chr(code ^ (1 << bit))
                if flipped in constants.LABEL_CHARSET:
                    yield self.replace_at(label, i, flipped)


class HomoglyphFuzzer(BaseFuzzer):
    """Swap letters for visually confusable code points.

    Results are usually non-ASCII; the engine derives punycode and the
    Cyrillic flag when it stores them.
    """

    def __init__(self):
        super().__init__(
            name="homoglyph",
            description="Replace letters with Cyrillic, Greek and Latin-extended confusables"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i, ch in enumerate(label):
            for glyph in constants.HOMOGLYPHS.get(ch, []):
                if glyph != ch:
                    yield self.replace_at(label, i, glyph)


class ReplacementFuzzer(BaseFuzzer):

    def __init__(self):
        super().__init__(
            name="replacement",
            description="Replace each character with its QWERTY neighbours"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i, ch in enumerate(label):
            for key in constants.KEYBOARD_ADJACENT.get(ch, ""):
                yield self.replace_at(label, i, key)


class VowelSwapFuzzer(BaseFuzzer):

    def __init__(self):
        super().__init__(
            name="vowel-swap",
            description="Replace each vowel with each of the other four"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i, ch in enumerate(label):
            if ch not in constants.VOWELS:
                continue
            for vowel in constants.VOWELS:
                if vowel != ch:
                    yield self.replace_at(label, i, vowel)
