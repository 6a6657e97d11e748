"""Posting modcalls and reports to a Discord webhook."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import requests

DEFAULT_COLOR = 0x05B2F7


class WebhookError(Exception):
    """Raised when a webhook request fails."""


@dataclass
class DiscordWebhook:
    """A Discord webhook that the server posts to.

    An empty url turns the webhook off: posts then do nothing.
    """

    url: str = ""
    server_name: str = ""
    color: int = DEFAULT_COLOR
    ping_role_id: str = ""
    timeout: float = 10.0

    def post_modcall(self, character: str, area: str, reason: str) -> None:
        """Send a modcall to the webhook."""
        embed = {
            "title": f"{character} sent a modcall in {area}.",
            "description": reason,
            "color": self.color,
        }
        payload: dict[str, Any] = {"embeds": [embed]}
        if self.server_name:
            payload["username"] = self.server_name
        if self.ping_role_id:
            payload["content"] = f"<@&{self.ping_role_id}>"
        self._send(json=payload)

    def post_report(self, name: str, contents: str) -> None:
        """Upload a report file to the webhook."""
        payload: dict[str, Any] = {}
        if self.server_name:
            payload["username"] = self.server_name
        self._send(
            data={"payload_json": json.dumps(payload)},
            files={"file": (name, contents.encode("utf-8"))},
        )

    def _send(self, **kwargs: Any) -> None:
        if not self.url:
            return
        try:
            resp = requests.post(self.url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise WebhookError(f"webhook request failed: {exc}") from exc
        if not resp.ok:
            raise WebhookError(f"webhook returned HTTP {resp.status_code}")