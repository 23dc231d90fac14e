"""Fuzzers driven by dictionary files. Both run only when requested by name."""

from typing import Iterator, List, Optional

from ..core.dictionary import read_dictionaries, default_tld_dictionary
from ..core.engine import Fuzzer, DomainParts
from ..utils.logger import get_logger

logger = get_logger(__name__)


class TldSwapFuzzer(Fuzzer):
    """Keep the label, swap the TLD for every entry of the TLD dictionaries."""

    def __init__(self):
        super().__init__(
            name="tld-swap",
            description="Combine the label with each TLD from the TLD dictionary files",
            explicit=True
        )

    def fuzz(self, parts: DomainParts, tld_files: Optional[List[str]] = None, **kwargs) -> Iterator[str]:
        paths = tld_files or [default_tld_dictionary()]
        tlds = read_dictionaries(paths)
        logger.debug(f"tld-swap using {len(tlds)} TLDs from {paths}")
        for tld in tlds:
            tld = tld.lower()
            if tld == parts.tld:
                continue
            yield parts.join(tld=tld)


class DictionaryFuzzer(Fuzzer):
    """Glue dictionary words onto the label, with and without a hyphen."""

    def __init__(self):
        super().__init__(
            name="dictionary",
            description="Prepend and append each dictionary word to the label",
            explicit=True
        )

    def fuzz(self, parts: DomainParts, dictionary: Optional[str] = None, **kwargs) -> Iterator[str]:
        if not dictionary:
            logger.debug("dictionary fuzzer selected without a dictionary file")
            return
        for word in read_dictionaries([dictionary]):
            word = word.lower()
            if word == parts.label:
                continue
            for label in (parts.label + word, f"{parts.label}-{word}",
                          word + parts.label, f"{word}-{parts.label}"):
                yield parts.join(label=label)
