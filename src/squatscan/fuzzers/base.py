"""Base fuzzer implementation with label-editing helpers."""

from abc import ABC, abstractmethod
from typing import Iterator

from ..core.engine import Fuzzer, DomainParts


class BaseFuzzer(Fuzzer, ABC):
    """Base class providing common label edits.

    Subclasses implement ``mutate_label`` and get ``fuzz`` for free; the
    edits operate on the primary label only.
    """

    @abstractmethod
    def mutate_label(self, label: str) -> Iterator[str]:
        """Yield mutated versions of ``label``."""
        pass

    def fuzz(self, parts: DomainParts, **kwargs) -> Iterator[str]:
        for label in self.mutate_label(parts.label):
            yield parts.join(label=label)

    @staticmethod
    def replace_at(label: str, index: int, text: str) -> str:
        """Replace the character at ``index`` with ``text``."""
        return label[:index] + text + label[index + 1:]

    @staticmethod
    def insert_at(label: str, index: int, text: str) -> str:
        """Insert ``text`` before the character at ``index``."""
        return label[:index] + text + label[index:]

    @staticmethod
    def delete_at(label: str, index: int) -> str:
        return label[:index] + label[index + 1:]

    @staticmethod
    def swap_at(label: str, index: int) -> str:
        """Swap the characters at ``index`` and ``index + 1``."""
        return label[:index] + label[index + 1] + label[index] + label[index + 2:]
