from __future__ import annotations

from enum import Enum
from typing import Mapping

# ------------------------------------------------------------
# Roles
# ------------------------------------------------------------


class Role(Enum):
    """
    Semantic color slot. The value is the label shown in tables.
    """

    # Accents
    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    CYAN = "Cyan"
    BLUE = "Blue"
    PURPLE = "Purple"
    DARK_RED = "Dark Red"
    DARK_YELLOW = "Dark Yellow"
    DARK_PURPLE = "Dark Purple"

    # Foreground stack
    TEXT = "Text"
    SUBTEXT1 = "Subtext1"
    SUBTEXT0 = "Subtext0"
    OVERLAY2 = "Overlay2"
    OVERLAY1 = "Overlay1"
    OVERLAY0 = "Overlay0"
    SURFACE2 = "Surface2"
    SURFACE1 = "Surface1"
    SURFACE0 = "Surface0"

    # Background stack
    BASE = "Base"
    MANTLE = "Mantle"
    CRUST = "Crust"

    @property
    def label(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        return ROLE_KEYS[self]

    @property
    def slug(self) -> str:
        return self.value.replace(" ", "-").replace("_", "-").lower()


ROLE_KEYS: dict[Role, str] = {
    Role.RED: "red",
    Role.ORANGE: "orange",
    Role.YELLOW: "yellow",
    Role.GREEN: "green",
    Role.CYAN: "cyan",
    Role.BLUE: "blue",
    Role.PURPLE: "purple",
    Role.DARK_RED: "dark_red",
    Role.DARK_YELLOW: "dark_yellow",
    Role.DARK_PURPLE: "dark_purple",
    Role.TEXT: "fg",
    Role.SUBTEXT1: "light_grey",
    Role.SUBTEXT0: "grey",
    Role.OVERLAY2: "bg2",
    Role.OVERLAY1: "bg3",
    Role.OVERLAY0: "bg_blue",
    Role.SURFACE2: "diff_text",
    Role.SURFACE1: "diff_change",
    Role.SURFACE0: "diff_add",
    Role.BASE: "bg0",
    Role.MANTLE: "bg1",
    Role.CRUST: "bg_d",
}

# Output order for swatches and table rows (authoritative)
ROLE_ORDER: tuple[Role, ...] = (
    Role.RED,
    Role.ORANGE,
    Role.YELLOW,
    Role.GREEN,
    Role.CYAN,
    Role.BLUE,
    Role.PURPLE,
    Role.DARK_RED,
    Role.DARK_YELLOW,
    Role.DARK_PURPLE,
    Role.TEXT,
    Role.SUBTEXT1,
    Role.SUBTEXT0,
    Role.OVERLAY2,
    Role.OVERLAY1,
    Role.OVERLAY0,
    Role.SURFACE2,
    Role.SURFACE1,
    Role.SURFACE0,
    Role.BASE,
    Role.MANTLE,
    Role.CRUST,
)


# ------------------------------------------------------------
# Lookup
# ------------------------------------------------------------


def ordered_roles() -> tuple[Role, ...]:
    return ROLE_ORDER


def resolve(role: Role | str) -> str | None:
    """
    Palette key for a role or role label, None if the label is unknown.
    """
    if not isinstance(role, Role):
        try:
            role = Role(role)
        except ValueError:
            return None
    return ROLE_KEYS.get(role)


def present_roles(colors: Mapping[str, str]) -> list[tuple[Role, str]]:
    """
    Roles whose palette key is present, in display order, paired with
    the raw hex value from the palette.
    """
    found = []
    for role in ROLE_ORDER:
        key = resolve(role)
        if key is None or key not in colors:
            continue
        found.append((role, colors[key]))
    return found
