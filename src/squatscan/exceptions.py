"""Exceptions module for SquatScan."""


class SquatScanException(Exception):
    """Base exception class for SquatScan."""


class ConfigError(SquatScanException, ValueError):
    """Exception class for invalid or conflicting options."""


class InvalidDomainError(SquatScanException, ValueError):
    """Exception class for a target domain that cannot be split into label and TLD."""


class FuzzerError(SquatScanException):
    """Exception class for SquatScan mutation errors."""


class NoSuchFuzzerError(FuzzerError):
    """Exception class for SquatScan when a fuzzer is not found."""


class ScanException(SquatScanException):
    """Exception class for SquatScan enrichment errors."""


class DNSLookupError(ScanException):
    """Exception class for a DNS answer with a non-success response code."""
