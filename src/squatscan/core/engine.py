"""Mutation engine: splits a target domain and applies named fuzzers to it."""

import importlib
import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Any, Optional, Iterator, Set

from .. import constants
from .candidate import Candidate
from .grammar import DomainGrammar, STRICT_GRAMMAR
from ..exceptions import NoSuchFuzzerError
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DomainParts:
    """A target domain split into fixed prefix, primary label and TLD."""

    prefix: str
    label: str
    tld: str

    def join(self, label: Optional[str] = None, tld: Optional[str] = None) -> str:
        """Reassemble a domain, optionally substituting the label or the TLD."""
        label = self.label if label is None else label
        tld = self.tld if tld is None else tld
        if self.prefix:
            return f"{self.prefix}.{label}.{tld}"
        return f"{label}.{tld}"

    def __str__(self) -> str:
        return self.join()


class Fuzzer(ABC):
    """Abstract base class for domain fuzzers."""

    def __init__(self, name: str, description: str = "", explicit: bool = False):
        """
        Initialize fuzzer.

        Args:
            name: Fuzzer name used in selectors
            description: Fuzzer description
            explicit: If True, the fuzzer only runs when requested by name
        """
        self.name = name
        self.description = description
        self.explicit = explicit

    @abstractmethod
    def fuzz(self, parts: DomainParts, **kwargs) -> Iterator[str]:
        """
        Generate candidate domains from the target.

        Args:
            parts: Split target domain
            **kwargs: Engine-level settings (tld_files, dictionary)

        Yields:
            Full candidate domain strings, not yet validated
        """
        pass

    def get_fuzzer_info(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'explicit': self.explicit,
            'class': self.__class__.__name__
        }


class MutationEngine:
    """Generates tagged, grammar-checked candidates for one target domain."""

    def __init__(self, parts: DomainParts, grammar: DomainGrammar = STRICT_GRAMMAR,
                 tld_files: Optional[List[str]] = None, dictionary: Optional[str] = None):
        """
        Initialize mutation engine.

        Args:
            parts: Split target domain
            grammar: Validation grammar every candidate must satisfy
            tld_files: TLD dictionary paths for tld-swap (bundled list if empty)
            dictionary: Word list path for the dictionary fuzzer
        """
        self.parts = parts
        self.grammar = grammar
        self.tld_files = list(tld_files or [])
        self.dictionary = dictionary
        self.fuzzers: Dict[str, Fuzzer] = {}

    @staticmethod
    def split_domain(domain: str) -> Optional[DomainParts]:
        """Split ``domain`` into prefix/label/TLD; None if it has fewer than two labels."""
        labels = domain.strip().lower().split('.')
        if len(labels) < 2:
            return None
        return DomainParts(
            prefix='.'.join(labels[:-2]),
            label=labels[-2],
            tld=labels[-1],
        )

    @classmethod
    def from_domain(cls, domain: str, **kwargs) -> Optional['MutationEngine']:
        """
        Build an engine with the built-in fuzzers registered.

        Returns:
            Engine, or None when ``domain`` cannot be split
        """
        parts = cls.split_domain(domain)
        if parts is None:
            logger.debug(f"Rejected target domain: {domain!r}")
            return None
        engine = cls(parts, **kwargs)
        engine.load_builtin_fuzzers()
        return engine

    @property
    def domain(self) -> str:
        return self.parts.join()

    def register_fuzzer(self, fuzzer: Fuzzer) -> None:
        self.fuzzers[fuzzer.name] = fuzzer
        logger.debug(f"Registered fuzzer: {fuzzer.name}")

    def unregister_fuzzer(self, name: str) -> bool:
        result = self.fuzzers.pop(name, None) is not None
        if result:
            logger.debug(f"Unregistered fuzzer: {name}")
        else:
            logger.warning(f"Attempted to unregister non-existent fuzzer: {name}")
        return result

    def get_fuzzer(self, name: str) -> Fuzzer:
        """
        Get a fuzzer by name.

        Raises:
            NoSuchFuzzerError: if no fuzzer is registered under ``name``
        """
        fuzzer = self.fuzzers.get(name)
        if fuzzer is None:
            raise NoSuchFuzzerError(f"Fuzzer '{name}' not found")
        return fuzzer

    def list_fuzzers(self) -> List[Dict[str, Any]]:
        return [fuzzer.get_fuzzer_info() for fuzzer in self.fuzzers.values()]

    def parse_selector(self, selector: str = "", strict: bool = False) -> List[str]:
        """
        Resolve a comma-separated selector into registered fuzzer names.

        An empty selector expands to the default set. Unknown names are
        dropped with a warning, or raise in strict mode.

        Raises:
            NoSuchFuzzerError: in strict mode, for an unrecognized name
        """
        names = [name.strip().lower() for name in (selector or "").split(',')]
        names = [name for name in names if name]
        if not names:
            names = list(constants.DEFAULT_FUZZERS)

        selected = []
        for name in names:
            if name not in self.fuzzers:
                if strict:
                    raise NoSuchFuzzerError(f"Fuzzer '{name}' not found")
                logger.warning(f"Ignoring unknown fuzzer: {name}")
                continue
            if name not in selected:
                selected.append(name)
        return selected

    def generate(self, selector: str = "", strict: bool = False) -> List[Candidate]:
        """
        Run the selected fuzzers and return the finished candidate list.

        The original domain always comes first, tagged ``original``. The
        returned list is owned by the caller; each call starts from scratch.

        An output already produced by an earlier fuzzer keeps that earlier
        tag, so per-fuzzer counts depend on selector order: with
        ``insertion,addition`` every addition variant is credited to
        insertion.

        Args:
            selector: Comma-separated fuzzer names ("" for the default set)
            strict: Raise on unknown fuzzer names instead of ignoring them

        Returns:
            Candidates in generation order, duplicates removed (first tag wins)
        """
        names = self.parse_selector(selector, strict)
        logger.debug(f"Generating permutations of {self.domain} with: {names}")

        candidates: List[Candidate] = []
        seen: Set[str] = set()
        self._add(candidates, seen, constants.ORIGINAL_TAG, self.domain)

        for name in names:
            fuzzer = self.fuzzers[name]
            before = len(candidates)
            for domain in fuzzer.fuzz(self.parts, tld_files=self.tld_files, dictionary=self.dictionary):
                self._add(candidates, seen, name, domain)
            logger.debug(f"Fuzzer '{name}' produced {len(candidates) - before} candidates")

        logger.info(f"Generated {len(candidates)} candidates for {self.domain}")
        return candidates

    def validate(self, fuzzer: str, domain: str) -> Optional[Candidate]:
        """
        Pass one raw fuzzer output through the validation gate.

        Non-ASCII names must have an IDNA encoding; the grammar is checked
        against the raw name first and then against its punycode form.

        Returns:
            Candidate, or None if the output is dropped
        """
        domain = domain.lower()
        try:
            candidate = Candidate.create(fuzzer, domain)
        except UnicodeError as e:
            logger.debug(f"Dropped {domain!r} from {fuzzer}: no IDNA encoding ({e})")
            return None

        if self.grammar.matches(candidate.name):
            return candidate
        if candidate.punycode and self.grammar.matches(candidate.punycode):
            return candidate
        logger.debug(f"Dropped {domain!r} from {fuzzer}: grammar mismatch")
        return None

    def _add(self, candidates: List[Candidate], seen: Set[str], fuzzer: str, domain: str) -> None:
        if domain.lower() in seen:
            return
        candidate = self.validate(fuzzer, domain)
        if candidate is None:
            return
        seen.add(candidate.name)
        candidates.append(candidate)

    def load_builtin_fuzzers(self) -> int:
        """
        Register every concrete Fuzzer class found in the ``squatscan.fuzzers`` package.

        Returns:
            Number of fuzzers registered
        """
        package = importlib.import_module('squatscan.fuzzers')
        fuzzers_dir = Path(package.__file__).parent

        loaded_count = 0
        for py_file in sorted(fuzzers_dir.glob("*.py")):
            if py_file.name.startswith("__"):
                continue
            module = importlib.import_module(f'squatscan.fuzzers.{py_file.stem}')
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if (issubclass(obj, Fuzzer) and
                        obj.__module__ == module.__name__ and
                        not inspect.isabstract(obj)):
                    self.register_fuzzer(obj())
                    loaded_count += 1

        logger.debug(f"Loaded {loaded_count} built-in fuzzers")
        return loaded_count
