"""Structural typo fuzzers: characters added, dropped, doubled or moved."""

from typing import Iterator

from .. import constants
from .base import BaseFuzzer


class AdditionFuzzer(BaseFuzzer):
    """Append one letter or digit to the label."""

    def __init__(self):
        super().__init__(
            name="addition",
            description="Append each of a-z and 0-9 to the end of the label"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for ch in constants.ASCII_LETTERS + constants.DIGITS:
            yield label + ch


class InsertionFuzzer(BaseFuzzer):
    """Insert one letter or digit at every boundary."""

    def __init__(self):
        super().__init__(
            name="insertion",
            description="Insert each of a-z and 0-9 before, between and after characters"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i in range(len(label) + 1):
            for ch in constants.ASCII_LETTERS + constants.DIGITS:
                yield self.insert_at(label, i, ch)


class OmissionFuzzer(BaseFuzzer):

    def __init__(self):
        super().__init__(
            name="omission",
            description="Delete one character at a time"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i in range(len(label)):
            yield self.delete_at(label, i)


class RepetitionFuzzer(BaseFuzzer):

    def __init__(self):
        super().__init__(
            name="repetition",
            description="Duplicate one character at a time"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i, ch in enumerate(label):
            yield self.insert_at(label, i, ch)


class TranspositionFuzzer(BaseFuzzer):

    def __init__(self):
        super().__init__(
            name="transposition",
            description="Swap each pair of adjacent characters"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i in range(len(label) - 1):
            yield self.swap_at(label, i)


class HyphenationFuzzer(BaseFuzzer):

    def __init__(self):
        super().__init__(
            name="hyphenation",
            description="Insert a hyphen at every internal character boundary"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        for i in range(1, len(label)):
            yield self.insert_at(label, i, "-")


class SubdomainFuzzer(BaseFuzzer):
    """Split the label with a dot, turning its head into a new subdomain level."""

    def __init__(self):
        super().__init__(
            name="subdomain",
            description="Insert a dot inside the label, away from existing hyphens"
        )

    def mutate_label(self, label: str) -> Iterator[str]:
        # last boundary excluded
        for i in range(1, len(label) - 1):
            if label[i] != '-' and label[i - 1] != '-':
                yield self.insert_at(label, i, ".")
