"""Constants for SquatScan."""

# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "core": "squatscan.core",
    "engine": "squatscan.core.engine",
    "candidate": "squatscan.core.candidate",
    "dict": "squatscan.core.dictionary",
    "config": "squatscan.core.config",
    "conf": "squatscan.core.config",
    "fuzzers": "squatscan.fuzzers",
    "fuzz": "squatscan.fuzzers",
    "scanner": "squatscan.scanner",
    "scan": "squatscan.scanner.scanner",
    "resolver": "squatscan.scanner.resolver",
    "dns": "squatscan.scanner.resolver",
    "geoip": "squatscan.scanner.geoip",
    "banners": "squatscan.scanner.banners",
    "twister": "squatscan.twister",
    "formatter": "squatscan.formatter",
    "cli": "squatscan.cli",
    "utils": "squatscan.utils",
}

# Top-level modules within squatscan for auto-prefixing
KNOWN_TOP_MODULES = {
    "core",
    "fuzzers",
    "scanner",
    "utils",
    "twister",
    "formatter",
    "cli",
}

# --- Mutation Engine ---
ORIGINAL_TAG = "original"

# Order matters: this is the order in which an empty selector runs them.
DEFAULT_FUZZERS = [
    "addition",
    "bitsquatting",
    "homoglyph",
    "hyphenation",
    "insertion",
    "omission",
    "repetition",
    "replacement",
    "subdomain",
    "transposition",
    "vowel-swap",
]

# Only run when asked for by name
EXPLICIT_FUZZERS = [
    "tld-swap",
    "dictionary",
]

FQDN_PATTERN = r"^([a-z0-9-]{1,63}\.)+[a-z]{2,63}$"
UNICODE_FQDN_PATTERN = r"^(.+\.)+[a-z]{2,63}$"

ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
LABEL_CHARSET = ASCII_LETTERS + DIGITS + "-"
VOWELS = "aeiou"

DEFAULT_TLD_DICTIONARY = "common_tlds.dict"
COMMENT_MARKER = "//"

# QWERTY neighbours
KEYBOARD_ADJACENT = {
    'a': "qwsz",
    'b': "vghn",
    'c': "xdfv",
    'd': "serfcx",
    'e': "wrsd",
    'f': "drtgvc",
    'g': "ftyhbv",
    'h': "gyujnb",
    'i': "ujko",
    'j': "huikmn",
    'k': "jiolm",
    'l': "kop",
    'm': "njk",
    'n': "bhjm",
    'o': "iklp",
    'p': "ol",
    'q': "wa",
    'r': "edft",
    's': "awedxz",
    't': "rfgy",
    'u': "yhji",
    'v': "cfgb",
    'w': "qase",
    'x': "zsdc",
    'y': "tghu",
    'z': "asx",
}

# Latin letter -> visually confusable code points (Cyrillic, Greek, Latin extended)
HOMOGLYPHS = {
    'a': ['а', 'α'],  # Cyrillic a, Greek alpha
    'b': ['ь', 'в'],
    'c': ['с', 'ç'],  # Cyrillic es, c-cedilla
    'd': ['ԁ'],
    'e': ['е'],
    'g': ['ɡ'],  # Latin script g
    'h': ['һ'],
    'i': ['і'],
    'j': ['ј'],
    'k': ['к'],
    'l': ['ӏ'],  # Cyrillic palochka
    'm': ['м'],
    'n': ['п'],
    'o': ['о', 'ο'],  # Cyrillic o, Greek omicron
    'p': ['р'],
    'q': ['ԛ'],
    's': ['ѕ'],
    't': ['т'],
    'u': ['υ'],  # Greek upsilon
    'v': ['ѵ'],
    'w': ['ԝ'],
    'x': ['х'],
    'y': ['у'],
}

# --- Enrichment Scanner ---
DEFAULT_NAMESERVER = "8.8.8.8"
DEFAULT_DNS_PORT = 53
DEFAULT_TIMEOUT = 5.0
DEFAULT_THREADS = 10
DEFAULT_USER_AGENT = "Mozilla/5.0 squatscan"
DEFAULT_GEOIP_DATABASE = "GeoLite2-Country.mmdb"
GEOIP_DATABASE_ENV = "GEOLITE2_MMDB"

HTTP_PORT = 80
SMTP_PORT = 25
BANNER_RECV_BYTES = 1024

REGISTERED_BY_TYPES = ["A", "NS"]

# --- Output ---
OUTPUT_FORMATS = ["cli", "cli-table", "csv", "json", "list"]
CSV_HEADER = ["fuzzer", "domain", "a_records", "mx_records", "ns_records"]
