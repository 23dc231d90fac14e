"""Reader for line-oriented dictionary files (TLD lists, word lists)."""

from importlib import resources
from pathlib import Path
from typing import Iterable, List, Union

from .. import constants
from ..utils.logger import get_logger

logger = get_logger(__name__)


def parse_dictionary(lines: Iterable[str]) -> List[str]:
    """
    Parse dictionary entries from an iterable of lines.

    Blank lines and lines starting with ``//`` are skipped; an inline ``//``
    truncates the line; surrounding whitespace is trimmed.

    Args:
        lines: Raw text lines

    Returns:
        Entries in file order (duplicates kept)
    """
    entries = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith(constants.COMMENT_MARKER):
            continue
        idx = line.find(constants.COMMENT_MARKER)
        if idx != -1:
            line = line[:idx].strip()
        if line:
            entries.append(line)
    return entries


def read_dictionary(path: Union[str, Path]) -> List[str]:
    """Read one UTF-8 dictionary file.

    Raises:
        OSError: if the file cannot be opened
    """
    with open(path, 'r', encoding='utf-8') as f:
        return parse_dictionary(f)


def read_dictionaries(paths: Union[str, Iterable[str]]) -> List[str]:
    """
    Read and merge several dictionary files, de-duplicating entries.

    Unreadable files are skipped with a warning so that one bad path does
    not discard the rest.

    Args:
        paths: Comma-separated string or iterable of paths; each element
            may itself be a comma-separated list

    Returns:
        Unique entries, first occurrence order preserved
    """
    if isinstance(paths, str):
        paths = [paths]
    paths = [path for item in paths for path in item.split(',')]

    seen = set()
    merged = []
    for path in paths:
        path = path.strip()
        if not path:
            continue
        try:
            entries = read_dictionary(path)
        except OSError as e:
            logger.warning(f"Skipping unreadable dictionary {path}: {e}")
            continue
        logger.debug(f"Read {len(entries)} entries from {path}")
        for entry in entries:
            if entry not in seen:
                seen.add(entry)
                merged.append(entry)
    return merged


def default_tld_dictionary() -> str:
    """Path of the TLD list bundled with the package."""
    return str(resources.files('squatscan') / 'dictionaries' / constants.DEFAULT_TLD_DICTIONARY)
