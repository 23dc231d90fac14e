"""Enrichment scanner: DNS, GeoIP and banner probes."""

from .banners import http_banner, smtp_banner
from .geoip import GeoIPLookup, open_geoip
from .resolver import Resolver, parse_nameserver
from .scanner import Scanner

__all__ = [
    "Scanner",
    "Resolver",
    "parse_nameserver",
    "GeoIPLookup",
    "open_geoip",
    "http_banner",
    "smtp_banner",
]
