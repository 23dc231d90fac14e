"""SquatScan - domain permutation engine for typosquatting and phishing detection."""

__version__ = "0.1.0"
__author__ = "SquatScan Team"

from .core.candidate import Candidate
from .core.config import ScannerConfig, TwistConfig
from .core.engine import Fuzzer, MutationEngine
from .scanner.scanner import Scanner
from .twister import Results, Twister

__all__ = [
    "Candidate",
    "ScannerConfig",
    "TwistConfig",
    "Fuzzer",
    "MutationEngine",
    "Scanner",
    "Results",
    "Twister",
]
