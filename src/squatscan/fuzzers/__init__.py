"""Domain fuzzers package."""

from .base import BaseFuzzer
from .typo import (
    AdditionFuzzer,
    InsertionFuzzer,
    OmissionFuzzer,
    RepetitionFuzzer,
    TranspositionFuzzer,
    HyphenationFuzzer,
    SubdomainFuzzer,
)
from .substitution import (
    BitsquattingFuzzer,
    HomoglyphFuzzer,
    ReplacementFuzzer,
    VowelSwapFuzzer,
)
from .wordlist import TldSwapFuzzer, DictionaryFuzzer

__all__ = [
    "BaseFuzzer",
    "AdditionFuzzer",
    "InsertionFuzzer",
    "OmissionFuzzer",
    "RepetitionFuzzer",
    "TranspositionFuzzer",
    "HyphenationFuzzer",
    "SubdomainFuzzer",
    "BitsquattingFuzzer",
    "HomoglyphFuzzer",
    "ReplacementFuzzer",
    "VowelSwapFuzzer",
    "TldSwapFuzzer",
    "DictionaryFuzzer",
]
