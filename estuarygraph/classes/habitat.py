"""
Habitat classification for estuary map nodes.
"""

from enum import Enum


class HabitatType(Enum):
    """Habitat classes a map node can belong to."""
    DISTRIBUTARY = "Distributary"
    BLIND_CHANNEL = "BlindChannel"
    HARBOR = "Harbor"
    NEARSHORE = "Nearshore"
    IMPOUNDMENT = "Impoundment"
    LOW_TIDE_TERRACE = "LowTideTerrace"

    @classmethod
    def from_name(cls, sName: str) -> "HabitatType":
        """
        Parse a habitat from its value ("BlindChannel") or member name ("BLIND_CHANNEL").

        Args:
            sName: Habitat name, case-insensitive

        Returns:
            HabitatType: The matching habitat

        Raises:
            ValueError: If the name matches no habitat
        """
        if isinstance(sName, cls):
            return sName
        sKey = str(sName).strip().replace("_", "").replace(" ", "").lower()
        for eHabitat in cls:
            if sKey == eHabitat.value.lower() or sKey == eHabitat.name.replace("_", "").lower():
                return eHabitat
        raise ValueError(f"Unknown habitat type: {sName}")
