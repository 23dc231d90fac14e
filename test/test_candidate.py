"""Tests for the candidate record."""

import pytest
import idna

from squatscan.core.candidate import (
    Candidate, contains_cyrillic, contains_non_ascii, to_punycode, from_punycode
)


class TestCandidate:
    """Test cases for Candidate class."""

    def test_create_ascii_candidate(self):
        """Test creating a plain ASCII candidate."""
        candidate = Candidate.create("original", "example.com")

        assert candidate.fuzzer == "original"
        assert candidate.name == "example.com"
        assert candidate.punycode == ""
        assert candidate.cyrillic is False
        assert candidate.ascii_name == "example.com"

    def test_maps_start_empty(self):
        """Test that enrichment maps exist and are empty on creation."""
        candidate = Candidate.create("addition", "examplea.com")

        assert candidate.dns == {}
        assert candidate.banner == {}
        assert candidate.whois == {}
        assert candidate.lsh == {}
        assert candidate.geoip == ""
        assert candidate.phash == 0

    def test_maps_are_not_shared(self):
        """Test that two candidates never share enrichment maps."""
        first = Candidate.create("addition", "examplea.com")
        second = Candidate.create("addition", "exampleb.com")

        first.dns["A"] = ["192.0.2.1"]

        assert second.dns == {}

    def test_cyrillic_candidate(self):
        """Test a candidate with Cyrillic homoglyphs."""
        candidate = Candidate.create("homoglyph", "gооgle.com")

        assert candidate.punycode.startswith("xn--")
        assert candidate.cyrillic is True
        assert candidate.ascii_name == candidate.punycode

    def test_greek_candidate_is_not_cyrillic(self):
        """Test that a Greek substitution is non-ASCII but not Cyrillic."""
        candidate = Candidate.create("homoglyph", "gοogle.com")

        assert candidate.punycode != ""
        assert candidate.cyrillic is False

    def test_punycode_round_trip(self):
        """Test decoding punycode reproduces the Unicode name."""
        name = "gоogle.com"
        candidate = Candidate.create("homoglyph", name)

        assert from_punycode(candidate.punycode) == name

    def test_invalid_idna_raises(self):
        """Test that a name without IDNA encoding is rejected."""
        with pytest.raises(idna.IDNAError):
            Candidate.create("homoglyph", "exa☃mple.com")

    def test_records_helpers(self):
        """Test record accessors and registration status."""
        candidate = Candidate.create("original", "example.com")
        candidate.dns["NS"] = ["ns1.example.com"]

        assert candidate.records("A") == []
        assert candidate.has_records("NS")
        assert not candidate.is_registered()
        assert candidate.is_registered(by="NS")

    def test_to_dict_omits_empty_fields(self):
        """Test serialization leaves out empty enrichment."""
        candidate = Candidate.create("original", "example.com")

        assert candidate.to_dict() == {"fuzzer": "original", "domain": "example.com"}

    def test_to_dict_with_enrichment(self):
        """Test serialization of an enriched candidate."""
        candidate = Candidate.create("homoglyph", "gоogle.com")
        candidate.dns["A"] = ["192.0.2.1", "192.0.2.2"]
        candidate.geoip = "Germany"
        candidate.banner["http"] = "nginx"

        data = candidate.to_dict()

        assert data["punycode"] == candidate.punycode
        assert data["dns"] == {"A": ["192.0.2.1", "192.0.2.2"]}
        assert data["geoip"] == "Germany"
        assert data["banner"] == {"http": "nginx"}
        assert "whois" not in data


class TestScriptHelpers:
    """Test cases for script detection helpers."""

    def test_contains_non_ascii(self):
        """Test non-ASCII detection."""
        assert not contains_non_ascii("example.com")
        assert contains_non_ascii("çool.com")

    def test_contains_cyrillic(self):
        """Test Cyrillic detection ignores other scripts."""
        assert contains_cyrillic("аpple.com")
        assert not contains_cyrillic("αpple.com")
        assert not contains_cyrillic("çool.com")
        assert not contains_cyrillic("apple.com")

    def test_to_punycode(self):
        """Test IDNA encoding of a Unicode name."""
        assert to_punycode("bücher.de") == "xn--bcher-kva.de"
