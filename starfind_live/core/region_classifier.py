"""Free-text region classification for STARFIND LIVE."""

from typing import Optional, Tuple

from ..models.regions import Region

# First matching rule wins. Keywords are lowercase substrings.
_REGION_RULES: Tuple[Tuple[Tuple[str, ...], Region], ...] = (
    (("asg",), Region.ASGARNIA),
    (("kand",), Region.KANDARIN),
    (("wilder",), Region.WILDERNESS),
    (("des", "kharid", "menaph"), Region.KHARIDIAN_DESERT),
    (("mist", "varrock", "lumb"), Region.MISTHALIN),
    (("pisc", "gnome", "tir"), Region.PISC_GNOME_TIRANNWN),
    (("frem", "lunar"), Region.FREM_LUNAR),
    (("feldip",), Region.KANDARIN),
)

DEFAULT_REGION = Region.MISTHALIN


def classify_region(label: Optional[str]) -> Region:
    """Map a raw region label to one of the 7 canonical regions.

    Never raises; unmatched or empty labels fall back to Misthalin.
    """
    text = (label or "").lower()
    for keywords, region in _REGION_RULES:
        if any(k in text for k in keywords):
            return region
    return DEFAULT_REGION
