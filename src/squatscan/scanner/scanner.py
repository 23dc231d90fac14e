"""Bounded-concurrency enrichment of candidate domains."""

from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from .. import constants
from ..core.candidate import Candidate
from ..core.config import ScannerConfig
from ..utils.logger import get_logger
from .banners import http_banner, smtp_banner
from .geoip import GeoIPLookup, open_geoip
from .resolver import LOOKUP_ERRORS, Resolver

logger = get_logger(__name__)


class Scanner:
    """
    Enriches candidates with DNS records, country and service banners.

    Each candidate goes through a fixed pipeline:

    1. A lookup. Failure ends the pipeline for that candidate.
    2. GeoIP country of the first A record, if enabled.
    3. HTTP ``Server`` header from the first A record, if enabled.
    4. MX lookup and SMTP greeting of the first exchanger, if enabled.
    5. NS lookup, if enabled.

    Any stage failing only leaves its field unset.
    """

    def __init__(self, config: Optional[ScannerConfig] = None, resolver: Optional[Resolver] = None,
                 geoip: Optional[GeoIPLookup] = None):
        """
        Initialize scanner.

        Args:
            config: Scanner options
            resolver: Resolver to use instead of one built from ``config.nameservers``
            geoip: GeoIP lookup to use instead of opening ``config.geoip_database``

        Raises:
            ConfigError: if the first nameserver is malformed
        """
        self.config = config or ScannerConfig()
        if self.config.nameservers:
            self.nameserver = self.config.nameservers[0]
        else:
            self.nameserver = f"{constants.DEFAULT_NAMESERVER}:{constants.DEFAULT_DNS_PORT}"

        self.resolver = resolver or Resolver(self.nameserver, timeout=self.config.dns_timeout)

        self.geoip = geoip
        if self.geoip is None and self.config.geoip:
            self.geoip = open_geoip(self.config.geoip_database)

    def scan(self, candidates: Sequence[Candidate]) -> List[Candidate]:
        """
        Enrich every candidate, at most ``config.threads`` at a time.

        Candidates are updated in place. The call returns once all of them
        are done.

        Args:
            candidates: Candidates to enrich

        Returns:
            The same candidates, in input order
        """
        results: List[Optional[Candidate]] = [None] * len(candidates)
        if not candidates:
            return []

        logger.info(f"Scanning {len(candidates)} candidates with {self.config.threads} threads "
                    f"via {self.nameserver}")

        # each task writes only its own slot
        def task(index: int, candidate: Candidate) -> None:
            try:
                self.enrich(candidate)
            except Exception as e:
                logger.error(f"Unexpected error while scanning {candidate.name}: {e}")
            results[index] = candidate

        with ThreadPoolExecutor(max_workers=self.config.threads, thread_name_prefix="squatscan") as executor:
            futures = [executor.submit(task, i, candidate) for i, candidate in enumerate(candidates)]
            wait(futures)

        registered = sum(1 for candidate in results if candidate.has_records("A"))
        logger.info(f"Scan finished: {registered}/{len(results)} candidates resolve")
        return results

    def enrich(self, candidate: Candidate) -> Candidate:
        """Run the enrichment pipeline for one candidate."""
        name = candidate.ascii_name

        try:
            a_records = self.resolver.query(name, "A")
        except LOOKUP_ERRORS as e:
            logger.debug(f"A lookup for {name} failed: {e}")
            return candidate
        if a_records:
            candidate.dns["A"] = a_records
        address = a_records[0] if a_records else None

        if self.config.geoip and self.geoip is not None and address:
            country = self.geoip.country(address)
            if country:
                candidate.geoip = country

        if self.config.banners and address:
            banner = http_banner(address, name, self.config.user_agent, timeout=self.config.timeout)
            if banner:
                candidate.banner["http"] = banner

        if self.config.mxcheck:
            mx_records = self._lookup(name, "MX")
            if mx_records:
                candidate.dns["MX"] = mx_records
                banner = smtp_banner(mx_records[0], timeout=self.config.timeout)
                if banner:
                    candidate.banner["smtp"] = banner

        if self.config.nscheck:
            ns_records = self._lookup(name, "NS")
            if ns_records:
                candidate.dns["NS"] = ns_records

        return candidate

    def _lookup(self, name: str, rdtype: str) -> List[str]:
        try:
            return self.resolver.query(name, rdtype)
        except LOOKUP_ERRORS as e:
            logger.debug(f"{rdtype} lookup for {name} failed: {e}")
            return []

    def close(self) -> None:
        if self.geoip is not None:
            self.geoip.close()
