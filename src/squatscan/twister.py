"""Orchestrator: validate options, generate permutations, scan and filter them."""

from typing import Iterable, List, Optional

from .core.candidate import Candidate
from .core.config import TwistConfig
from .core.engine import MutationEngine
from .exceptions import ConfigError, InvalidDomainError
from .formatter import Formatter
from .scanner import GeoIPLookup, Resolver, Scanner
from .utils.logger import get_logger

logger = get_logger(__name__)


class Results(list):
    """A list of candidates with record-based filters and formatting."""

    def _where(self, predicate) -> 'Results':
        return Results(candidate for candidate in self if predicate(candidate))

    def with_a_records(self) -> 'Results':
        return self._where(lambda candidate: candidate.has_records("A"))

    def with_mx_records(self) -> 'Results':
        return self._where(lambda candidate: candidate.has_records("MX"))

    def with_ns_records(self) -> 'Results':
        return self._where(lambda candidate: candidate.has_records("NS"))

    def without_a_records(self) -> 'Results':
        return self._where(lambda candidate: not candidate.has_records("A"))

    def format(self, selector: str, all_records: bool = False) -> str:
        return Formatter(self, all_records=all_records).format(selector)


class Twister:
    """
    Runs one permutation job end to end.

    Example:
        >>> config = TwistConfig(domain="example.com", fuzzers="addition")
        >>> results = Twister(config).run()
        >>> print(results.format("cli"))
    """

    def __init__(self, config: TwistConfig, resolver: Optional[Resolver] = None,
                 geoip: Optional[GeoIPLookup] = None):
        """
        Initialize the job and fail fast on invalid options.

        Args:
            config: Job configuration
            resolver: Resolver handed to the scanner (built from config if None)
            geoip: GeoIP lookup handed to the scanner (opened from config if None)

        Raises:
            InvalidDomainError: if the domain is empty or has fewer than two labels
            ConfigError: on conflicting filters or a non-positive thread count
        """
        if not config.domain:
            raise InvalidDomainError("domain name is required")
        if config.registered and config.unregistered:
            raise ConfigError("options registered and unregistered are mutually exclusive")
        if config.scanner.threads < 1:
            raise ConfigError("number of threads must be greater than zero")

        self.config = config
        self.engine = MutationEngine.from_domain(
            config.domain,
            tld_files=config.tld_files,
            dictionary=config.dictionary,
        )
        if self.engine is None:
            raise InvalidDomainError(f"invalid domain name: {config.domain}")

        scanner_config = config.scanner
        if config.registered_by == "NS" and not scanner_config.nscheck:
            scanner_config = scanner_config.model_copy(update={'nscheck': True})
        self.scanner = Scanner(scanner_config, resolver=resolver, geoip=geoip)

        for warning in config.validate_config():
            logger.warning(warning)

    def generate(self, strict: bool = False) -> List[Candidate]:
        """Generate candidates without touching the network."""
        return self.engine.generate(self.config.fuzzers, strict=strict)

    def run(self, strict: bool = False) -> Results:
        """
        Generate, enrich and filter candidates.

        Args:
            strict: Raise on unknown fuzzer names instead of ignoring them

        Returns:
            Enriched candidates in generation order, filtered by registration status
        """
        candidates = self.generate(strict=strict)
        return self.filter(self.scanner.scan(candidates))

    def filter(self, candidates: Iterable[Candidate]) -> Results:
        """Apply the registered/unregistered filter, if any."""
        by = self.config.registered_by
        if self.config.registered:
            return Results(c for c in candidates if c.is_registered(by))
        if self.config.unregistered:
            return Results(c for c in candidates if not c.is_registered(by))
        return Results(candidates)

    def format(self, results: Iterable[Candidate]) -> str:
        """Render results in the configured output format."""
        return Formatter(list(results), all_records=self.config.scanner.all_records).format(self.config.format)

    def close(self) -> None:
        self.scanner.close()
