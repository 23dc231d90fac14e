"""Candidate record: one generated domain and everything learned about it."""

import unicodedata
from dataclasses import dataclass, field
from typing import Dict, List, Any

import idna

from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Candidate:
    """Represents a single domain permutation and its enrichment data."""

    fuzzer: str
    name: str
    punycode: str = ""
    cyrillic: bool = False

    # Enrichment, written by the scanner
    dns: Dict[str, List[str]] = field(default_factory=dict)
    geoip: str = ""
    banner: Dict[str, str] = field(default_factory=dict)

    # Reserved for external collaborators
    whois: Dict[str, str] = field(default_factory=dict)
    lsh: Dict[str, int] = field(default_factory=dict)
    phash: int = 0

    @classmethod
    def create(cls, fuzzer: str, name: str) -> "Candidate":
        """Build a candidate, deriving punycode and Cyrillic status from ``name``.

        Raises:
            idna.IDNAError: if ``name`` is non-ASCII and has no valid IDNA encoding
        """
        punycode = ""
        if contains_non_ascii(name):
            punycode = to_punycode(name)
        return cls(
            fuzzer=fuzzer,
            name=name,
            punycode=punycode,
            cyrillic=contains_cyrillic(name),
        )

    @property
    def ascii_name(self) -> str:
        """Name safe to put on the wire: punycode when present, else the raw name."""
        return self.punycode or self.name

    def records(self, rtype: str) -> List[str]:
        return self.dns.get(rtype, [])

    def has_records(self, rtype: str) -> bool:
        return len(self.records(rtype)) > 0

    def is_registered(self, by: str = "A") -> bool:
        """A candidate counts as registered once it resolves records of type ``by``."""
        return self.has_records(by)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict, omitting empty enrichment fields."""
        result: Dict[str, Any] = {
            'fuzzer': self.fuzzer,
            'domain': self.name,
        }
        if self.punycode:
            result['punycode'] = self.punycode
        if self.dns:
            result['dns'] = {rtype: list(values) for rtype, values in self.dns.items()}
        if self.geoip:
            result['geoip'] = self.geoip
        if self.banner:
            result['banner'] = dict(self.banner)
        if self.whois:
            result['whois'] = dict(self.whois)
        if self.lsh:
            result['lsh'] = dict(self.lsh)
        if self.phash:
            result['phash'] = self.phash
        return result


def contains_non_ascii(text: str) -> bool:
    return any(ord(ch) > 127 for ch in text)


def contains_cyrillic(text: str) -> bool:
    """True if any character belongs to one of the Cyrillic blocks.

    Greek and Latin-extended confusables are non-ASCII but not Cyrillic.
    """
    for ch in text:
        if ord(ch) <= 127:
            continue
        if unicodedata.name(ch, "").startswith("CYRILLIC"):
            return True
    return False


def to_punycode(name: str) -> str:
    """Encode an internationalized domain name to its ASCII-compatible form."""
    return idna.encode(name).decode('ascii')


def from_punycode(name: str) -> str:
    return idna.decode(name)
