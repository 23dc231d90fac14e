"""Country lookups backed by a MaxMind GeoLite2 database."""

from typing import Optional

import geoip2.database
import geoip2.errors
import maxminddb

from ..utils.logger import get_logger

logger = get_logger(__name__)


class GeoIPLookup:
    """Thin wrapper over :class:`geoip2.database.Reader` returning English country names."""

    def __init__(self, database: str):
        self.database = database
        self.reader = geoip2.database.Reader(database)
        logger.debug(f"Opened GeoIP database {database}")

    def country(self, address: str) -> Optional[str]:
        """Return the country name for ``address``, or None when unknown."""
        try:
            response = self.reader.country(address)
        except (geoip2.errors.GeoIP2Error, ValueError) as e:
            logger.debug(f"GeoIP lookup failed for {address}: {e}")
            return None
        return response.country.name or None

    def close(self) -> None:
        self.reader.close()


def open_geoip(database: str) -> Optional[GeoIPLookup]:
    """
    Open a GeoIP database.

    A missing or corrupt database disables the GeoIP stage instead of
    failing the scan.

    Args:
        database: Path to a ``.mmdb`` country database

    Returns:
        A lookup object, or None if the database could not be opened
    """
    try:
        return GeoIPLookup(database)
    except (OSError, ValueError, maxminddb.InvalidDatabaseError) as e:
        logger.warning(f"GeoIP disabled, could not open {database}: {e}")
        return None
