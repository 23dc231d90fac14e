"""Core permutation components."""

from .candidate import Candidate
from .grammar import DomainGrammar, STRICT_GRAMMAR, UNICODE_GRAMMAR
from .engine import DomainParts, Fuzzer, MutationEngine

__all__ = [
    "Candidate",
    "DomainGrammar",
    "STRICT_GRAMMAR",
    "UNICODE_GRAMMAR",
    "DomainParts",
    "Fuzzer",
    "MutationEngine",
]
