"""Render candidate lists as json, csv, plain list or aligned cli text."""

import csv
import io
import json
from typing import Callable, Dict, List, Sequence

from . import constants
from .core.candidate import Candidate
from .utils.logger import get_logger

logger = get_logger(__name__)


class Formatter:
    """Formats a fixed sequence of candidates in one of several output formats."""

    def __init__(self, candidates: Sequence[Candidate], all_records: bool = False):
        """
        Initialize formatter.

        Args:
            candidates: Candidates to render, in output order
            all_records: Show every DNS record instead of only the first of each type
        """
        self.candidates = list(candidates)
        self.all_records = all_records
        self._renderers: Dict[str, Callable[[], str]] = {
            'json': self.to_json,
            'csv': self.to_csv,
            'list': self.to_list,
            'cli': self.to_cli,
            'cli-table': self.to_cli,
        }

    def format(self, selector: str) -> str:
        """Render in the named format.

        Names are matched exactly (lowercase); anything else yields an empty string.
        """
        renderer = self._renderers.get(selector or "")
        if renderer is None:
            logger.debug(f"Unknown output format: {selector!r}")
            return ""
        return renderer()

    def _records(self, candidate: Candidate, rtype: str) -> List[str]:
        records = candidate.records(rtype)
        if self.all_records:
            return list(records)
        return list(records[:1])

    def to_json(self) -> str:
        return json.dumps([candidate.to_dict() for candidate in self.candidates],
                          indent=2, ensure_ascii=False)

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        writer.writerow(constants.CSV_HEADER)
        for candidate in self.candidates:
            writer.writerow([
                candidate.fuzzer,
                candidate.name,
                ';'.join(self._records(candidate, "A")),
                ';'.join(self._records(candidate, "MX")),
                ';'.join(self._records(candidate, "NS")),
            ])
        return buffer.getvalue()

    def to_list(self) -> str:
        return ''.join(f"{candidate.name}\n" for candidate in self.candidates)

    def to_cli(self) -> str:
        if not self.candidates:
            return ""
        fuzzer_width = max(len(candidate.fuzzer) for candidate in self.candidates) + 1
        domain_width = max(len(candidate.name) for candidate in self.candidates) + 1

        lines = []
        for candidate in self.candidates:
            info = []
            a_records = self._records(candidate, "A")
            if a_records:
                info.append(';'.join(a_records))
            mx_records = self._records(candidate, "MX")
            if mx_records:
                info.append(f"MX:{';'.join(mx_records)}")
            ns_records = self._records(candidate, "NS")
            if ns_records:
                info.append(f"NS:{';'.join(ns_records)}")
            if candidate.geoip:
                info.append(f"/{candidate.geoip}")
            if candidate.banner.get("http"):
                info.append(f"HTTP:{candidate.banner['http']}")
            if candidate.banner.get("smtp"):
                info.append(f"SMTP:{candidate.banner['smtp']}")

            lines.append(f"{candidate.fuzzer:<{fuzzer_width}} {candidate.name:<{domain_width}}"
                         f"{' '.join(info) or '-'}\n")
        return ''.join(lines)
