"""Domain-name grammar used by the mutation engine's validation gate."""

import re
from dataclasses import dataclass

from .. import constants


@dataclass(frozen=True)
class DomainGrammar:
    """Immutable FQDN matcher.

    Passed into the engine at construction so that callers (and tests) can
    swap in a relaxed grammar without touching shared state.
    """

    pattern: str = constants.FQDN_PATTERN

    def __post_init__(self):
        # frozen dataclass: compiled regex is cached through object.__setattr__
        object.__setattr__(self, '_regex', re.compile(self.pattern))

    def matches(self, domain: str) -> bool:
        """Check ``domain`` after lowercasing it."""
        return self._regex.fullmatch(domain.lower()) is not None


STRICT_GRAMMAR = DomainGrammar()
UNICODE_GRAMMAR = DomainGrammar(constants.UNICODE_FQDN_PATTERN)
