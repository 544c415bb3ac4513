"""Help Handler — static usage text for /help."""

from xpd_slash.schemas.interaction import (
    Embed, InteractionResponse, message_response,
)

HELP_TEXT = (
    "**Experienced** tracks how active you are and turns it into levels.\n\n"
    "`/rank [user] [showoff]` — show your level and rank, or someone else's.\n"
    "Right-click a user → Apps → **Get level** — same, from the user menu.\n"
    "Right-click a message → Apps → **Get author level** — level of whoever wrote it.\n"
    "`/card fetch|edit|reset` — customize the colors, font, and toy on your rank card.\n"
    "`/guild-card fetch|edit|reset` — the card defaults for this server (administrators only).\n"
    "`/config get|reset|levels|rewards` — server settings (administrators only).\n\n"
    "You earn experience by chatting; every message after a short cooldown counts."
)


def help_response() -> InteractionResponse:
    return message_response(
        embeds=[Embed(title="Experienced", description=HELP_TEXT, color=0x33A3FF)],
    )
