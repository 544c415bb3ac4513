"""Card Customization — pure parsing, layering, and display of rank card settings.

Invariants:
    - Colors are stored normalized as "#RRGGBB"
    - Font, toy, and layout values are one of the known asset names
    - The NULL sentinel clears a stored value; an absent option leaves it untouched
    - Effective settings layer user over guild over built-in defaults, field by field

Design Decisions:
    - Same id space for user and guild cards: Discord snowflakes never collide
    - Rendering is out of this service's hands; only the stored choices are managed here
"""

import re
from dataclasses import dataclass, fields, replace

from xpd_slash.core.errors import CardCustomizationError

NULL_SENTINEL = "NULL"

COLOR_FIELDS = (
    "username", "rank", "level", "border", "background",
    "progress_foreground", "progress_background",
    "foreground_xp_count", "background_xp_count",
)

FONTS = ("Roboto", "JetBrains Mono", "Montserrat-Alt1", "Lato", "Mojang")
CARD_LAYOUTS = ("classic.svg", "vertical.svg")
TOYS = (
    "airplane.png", "bee.png", "butterfly.png", "fox.png", "grassblock.png",
    "parrot.png", "pickaxe.png", "steve.png", "tree.png",
)

# field → (known values, label used in messages)
ITEM_FIELDS = {
    "font": (FONTS, "font"),
    "toy_image": (TOYS, "toy"),
    "card_layout": (CARD_LAYOUTS, "card layout"),
}

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{6})")


@dataclass(frozen=True)
class CardCustomization:
    username: str | None = None
    rank: str | None = None
    level: str | None = None
    border: str | None = None
    background: str | None = None
    progress_foreground: str | None = None
    progress_background: str | None = None
    foreground_xp_count: str | None = None
    background_xp_count: str | None = None
    font: str | None = None
    toy_image: str | None = None
    card_layout: str | None = None

    def merged_with(self, update: "CardCustomization") -> "CardCustomization":
        """Overlay every field `update` sets on top of these settings."""
        changes = {
            f.name: getattr(update, f.name)
            for f in fields(update)
            if getattr(update, f.name) is not None
        }
        return replace(self, **changes)


DEFAULT_CUSTOMIZATION = CardCustomization(
    username="#FFFFFF",
    rank="#FFFFFF",
    level="#FFFFFF",
    border="#FFFFFF",
    background="#000000",
    progress_foreground="#47B4EB",
    progress_background="#FFFFFF",
    foreground_xp_count="#FFFFFF",
    background_xp_count="#000000",
    font="Roboto",
    toy_image=None,
    card_layout="classic.svg",
)


def parse_color(field: str, value: str) -> str | None:
    if value == NULL_SENTINEL:
        return None
    match = _HEX_COLOR.fullmatch(value.strip())
    if match is None:
        raise CardCustomizationError(
            f"`{value}` is not a valid hex color for {field.replace('_', ' ')}!",
        )
    return f"#{match.group(1).upper()}"


def parse_item(field: str, value: str) -> str | None:
    known, label = ITEM_FIELDS[field]
    if value == NULL_SENTINEL:
        return None
    if value not in known:
        raise CardCustomizationError(
            f"Unknown {label} `{value}`. Available: {', '.join(known)}",
        )
    return value


def parse_card_edit(values: dict) -> dict[str, str | None]:
    """Option name → stored value for every option present. None means clear."""
    changes: dict[str, str | None] = {}
    for name, value in values.items():
        if value is None:
            continue
        if name in COLOR_FIELDS:
            changes[name] = parse_color(name, str(value))
        elif name in ITEM_FIELDS:
            changes[name] = parse_item(name, str(value))
    return changes


def layer_customizations(
    layers: list[CardCustomization],
) -> CardCustomization:
    """Defaults, then each layer in order; later layers win field by field."""
    effective = DEFAULT_CUSTOMIZATION
    for layer in layers:
        effective = effective.merged_with(layer)
    return effective


_LABELS = {
    "username": "Username color",
    "rank": "Rank color",
    "level": "Level color",
    "border": "Border color",
    "background": "Background color",
    "progress_foreground": "Progress bar completed color",
    "progress_background": "Progress bar remaining color",
    "foreground_xp_count": "Completed XP count color",
    "background_xp_count": "Remaining XP count color",
    "font": "Font",
    "toy_image": "Toy",
    "card_layout": "Card layout",
}


def describe_customizations(card: CardCustomization) -> str:
    return "\n".join(
        f"{label}: {_code_or_none(getattr(card, name))}"
        for name, label in _LABELS.items()
    )


def _code_or_none(value: str | None) -> str:
    return "none" if value is None else f"`{value}`"
