"""aiogram message handlers.

Hard contract: every incoming message produces exactly one reply. Searches that fail are answered
with a short, generic line; details stay in the logs.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from aiogram.types import Message

from hotel_finder.app import App
from hotel_finder.data.loader import known_cities
from hotel_finder.search.service import SearchResponse, search

logger = logging.getLogger(__name__)

MAX_LISTED = 10

HELP_TEXT = (
    "Send me what you are looking for, e.g.\n"
    "• cheapest Marriott redemption in Hyderabad\n"
    "• nearest hotels to the airport in Mumbai\n"
    "• Courtyard in Telangana under 20000 points"
)


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


def _format_points(value: float) -> str:
    return f"{value:,.0f}"


def format_hotel(index: int, hotel: dict[str, Any]) -> str:
    location = ", ".join(part for part in (hotel["city"], hotel["state"]) if part)
    line = f"{index}. {hotel['hotel']} ({hotel['brand']}), {location}: {_format_points(hotel['avgPtsNight'])} pts/night"
    if hotel["distanceKmFromAirport"] > 0:
        line += f", {hotel['distanceKmFromAirport']:.1f} km from airport"
    return line


def format_reply(response: SearchResponse) -> str:
    """Render a search response as a plain-text message."""

    if response.status == HTTPStatus.OK:
        count = response.body["count"]
        if count == 0:
            return "No hotels matched."
        lines = [f"Found {count} hotel{'s' if count != 1 else ''}:"]
        lines.extend(format_hotel(i, h) for i, h in enumerate(response.body["data"][:MAX_LISTED], 1))
        if count > MAX_LISTED:
            lines.append(f"…and {count - MAX_LISTED} more.")
        return "\n".join(lines)

    if response.status == HTTPStatus.BAD_REQUEST:
        return HELP_TEXT
    if response.status == HTTPStatus.UNPROCESSABLE_ENTITY:
        return "Sorry, I could not turn that into a search. Try rephrasing."
    if response.body.get("retryable"):
        return "The search service is slow right now. Please try again."
    return "Search is unavailable right now."


def help_reply(app: App) -> str:
    cities = known_cities(app.records)
    if not cities:
        return HELP_TEXT
    return f"{HELP_TEXT}\n\nCities: {', '.join(cities)}"


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply exactly once."""

    reply = "Search is unavailable right now."

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        if _is_command_text(raw_text):
            await message.answer(help_reply(app))
            return

        response = await search(raw_text, app)
        reply = format_reply(response)
    except Exception:
        # Handler boundary: never leak details to the chat.
        logger.exception("handler failed")

    await message.answer(reply)
