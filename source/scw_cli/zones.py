# ABOUTME: Scaleway zone and region definitions
# ABOUTME: Parses zones and derives the region each zone belongs to

"""Scaleway zones and regions."""

from scw_cli.errors import UnknownZoneError
from scw_cli.validators import is_zone

DEFAULT_ZONE = "fr-par-1"

# Zone -> region (as of 2024)
ZONE_REGIONS = {
    "fr-par-1": "fr-par",
    "fr-par-2": "fr-par",
    "fr-par-3": "fr-par",
    "nl-ams-1": "nl-ams",
    "nl-ams-2": "nl-ams",
    "pl-waw-1": "pl-waw",
    "pl-waw-2": "pl-waw",
}

# Zone names used by the v1 CLI
LEGACY_ZONES = {
    "par1": "fr-par-1",
    "ams1": "nl-ams-1",
}


def parse_zone(value: str) -> str:
    """Normalize a zone name, translating legacy v1 names.

    Args:
        value: Zone as entered by the user

    Returns:
        Canonical zone name

    Raises:
        ValueError: If the value is not shaped like a zone
    """
    zone = value.strip().lower()
    zone = LEGACY_ZONES.get(zone, zone)
    if not is_zone(zone):
        raise ValueError(f"invalid zone: '{value}'")
    return zone


def zone_to_region(zone: str) -> str:
    """Return the region a zone belongs to.

    Raises:
        UnknownZoneError: If the zone has no known region
    """
    try:
        return ZONE_REGIONS[zone]
    except KeyError:
        raise UnknownZoneError(f"{zone} is an unknown zone") from None
