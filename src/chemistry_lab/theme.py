"""
Element family palette (Qt-free). Built once at import as read-only mappings; ui/theme.py
turns these into QColors and stylesheet fragments.
"""

from types import MappingProxyType

from .db.element import Family


FAMILY_COLORS = MappingProxyType({
    Family.NONMETAL: "#ff9500",
    Family.ALKALI_METAL: "#ff3b30",
    Family.ALKALINE_EARTH_METAL: "#ff2d55",
    Family.TRANSITION_METAL: "#007aff",
    Family.POST_TRANSITION_METAL: "#4287f5",
    Family.NOBLE_GAS: "#af52de",
    Family.METALLOID: "#3a3a3c",
    Family.RADIOACTIVE: "#6ebf52",
    Family.LANTHANIDE: "#34c759",
    Family.ACTINIDE: "#e0d617",
})

# Families whose tile needs dark text for contrast
DARK_TEXT_FAMILIES = frozenset({Family.ACTINIDE})

BADGE_HALOGEN = "#ffcc00"
BADGE_RADIOACTIVE = FAMILY_COLORS[Family.RADIOACTIVE]

# Quiz feedback
COLOR_CORRECT = "#33cc33"
COLOR_INCORRECT = "#cc3333"
COLOR_OPTION_SELECTED = "#80abf5"

FALLBACK_COLOR = "#8e8e93"


def family_color(family: Family | str) -> str:
    """Display color for a family name; unknown names get a neutral grey."""
    try:
        return FAMILY_COLORS[Family(family)]
    except ValueError:
        return FALLBACK_COLOR


def text_color_for(family: Family | str) -> str:
    try:
        return "#1c1c1e" if Family(family) in DARK_TEXT_FAMILIES else "#ffffff"
    except ValueError:
        return "#ffffff"
