"""Discord HTTP API client for STARFIND LIVE.

Polls announcement channels for new messages and flattens each one
(content plus embeds) into the plain-text blob the announcement parser
expects.

Flatten order: content, then per embed: title, description, each field
name and value, footer text. Joined with newlines.
"""

from typing import Dict, List, Optional, Sequence, Set

import requests

from ..config.thresholds import (
    DISCORD_API_BASE,
    DISCORD_MESSAGE_LIMIT,
    DISCORD_POLL_INTERVAL,
    DISCORD_TIMEOUT,
)

MESSAGES_ENDPOINT = DISCORD_API_BASE + "/channels/{channel_id}/messages"


def flatten_message(msg: dict) -> str:
    """Merge message content and embed text into one newline-joined blob."""
    text = msg.get("content") or ""
    for embed in msg.get("embeds") or []:
        if embed.get("title"):
            text += f"\n{embed['title']}"
        if embed.get("description"):
            text += f"\n{embed['description']}"
        for f in embed.get("fields") or []:
            text += f"\n{f.get('name', '')}\n{f.get('value', '')}"
        footer = embed.get("footer") or {}
        if footer.get("text"):
            text += f"\n{footer['text']}"
    return text


def parse_channel_ids(raw: Optional[str]) -> List[str]:
    """Split a comma-separated channel id list, dropping blanks."""
    return [s.strip() for s in (raw or "").split(",") if s.strip()]


class DiscordClient:
    """Polls Discord channel message history over HTTP.

    The first successful fetch of a channel only sets its cursor, so
    messages posted before the session started are never returned.
    """

    def __init__(
        self,
        token: str,
        channel_ids: Sequence[str],
        poll_interval: float = DISCORD_POLL_INTERVAL,
        timeout: int = DISCORD_TIMEOUT,
    ) -> None:
        if not token:
            raise ValueError(
                "DISCORD_TOKEN is required. "
                "Set it as an environment variable: export DISCORD_TOKEN='your-bot-token'"
            )
        self.token = token
        self.channel_ids = list(channel_ids)
        self.poll_interval = poll_interval
        self.timeout = timeout
        self._primed: Set[str] = set()
        self._last_message_id: Dict[str, str] = {}

    def fetch_messages(self, channel_id: str) -> List[dict]:
        """Fetch messages newer than the channel cursor.

        Args:
            channel_id: Discord channel snowflake id.

        Returns:
            List of raw message dicts (newest first, as Discord returns them).
            Returns empty list on error (does not crash).
        """
        url = MESSAGES_ENDPOINT.format(channel_id=channel_id)
        params = {"limit": DISCORD_MESSAGE_LIMIT}
        after = self._last_message_id.get(channel_id)
        if after:
            params["after"] = after
        headers = {"Authorization": f"Bot {self.token}"}

        try:
            resp = requests.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            messages = resp.json()

            if not isinstance(messages, list):
                return []
            self._primed.add(channel_id)
            return messages

        except requests.exceptions.Timeout:
            return []
        except requests.exceptions.RequestException:
            return []
        except (ValueError, KeyError):
            return []

    def poll_texts(self) -> List[str]:
        """Fetch every channel and return flattened text of new messages.

        Messages are returned oldest first within each channel. Anything at
        or below the channel cursor is skipped, and a channel's first
        successful fetch returns nothing.
        """
        texts: List[str] = []
        for channel_id in self.channel_ids:
            backlog = channel_id not in self._primed
            messages = self.fetch_messages(channel_id)
            cursor = int(self._last_message_id.get(channel_id, 0))
            for msg in sorted(messages, key=_message_id):
                msg_id = _message_id(msg)
                if msg_id <= cursor:
                    continue
                cursor = msg_id
                self._last_message_id[channel_id] = str(msg_id)
                if backlog:
                    continue
                text = flatten_message(msg)
                if text.strip():
                    texts.append(text)
        return texts


def _message_id(msg: dict) -> int:
    try:
        return int(msg.get("id") or 0)
    except (TypeError, ValueError):
        return 0
