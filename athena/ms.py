"""Advertising the server to the master server list."""

from __future__ import annotations

import dataclasses
import json
import queue
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import requests

if TYPE_CHECKING:
    from athena.logger import Logger

ADVERTISE_INTERVAL = 5 * 60.0


@dataclass
class Advertisement:
    """What the master server is told about this server."""

    port: int
    name: str
    desc: str = ""
    players: int = 0
    ip: str = ""
    ws_port: int = 0
    wss_port: int = 0

    def to_json(self) -> str:
        """Encode the advertisement as the master server expects it."""
        data: dict[str, object] = {}
        if self.ip:
            data["ip"] = self.ip
        data["port"] = self.port
        if self.ws_port:
            data["ws_port"] = self.ws_port
        if self.wss_port:
            data["wss_port"] = self.wss_port
        data["players"] = self.players
        data["name"] = self.name
        data["description"] = self.desc
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def post_server(ms_url: str, advert: Advertisement, logger: Logger | None = None) -> None:
    """Send an advertisement to the master server; failures are logged."""
    try:
        resp = requests.post(
            ms_url,
            data=advert.to_json().encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=30,
        )
        resp.close()
    except requests.RequestException as exc:
        if logger is not None:
            logger.error(f"Failed to post advertisement: {exc}")


_STOP = None


class Advertiser:
    """Posts the advertisement periodically and whenever the player count changes."""

    def __init__(
        self,
        ms_url: str,
        advert: Advertisement,
        logger: Logger | None = None,
        interval: float = ADVERTISE_INTERVAL,
    ) -> None:
        self.ms_url = ms_url
        self.advert = dataclasses.replace(advert)
        self.logger = logger
        self.interval = interval
        self._updates: queue.Queue[int | None] = queue.Queue()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start advertising in a background thread."""
        if self._thread is not None:
            raise RuntimeError("advertiser already started")
        self._thread = threading.Thread(target=self._run, name="ms-advertiser", daemon=True)
        self._thread.start()

    def update_players(self, players: int) -> None:
        """Report a new player count; it is posted at once."""
        self._updates.put(int(players))

    def stop(self) -> None:
        """Stop advertising and wait for the background thread to end."""
        self._updates.put(_STOP)
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        post_server(self.ms_url, self.advert, self.logger)
        next_tick = time.monotonic() + self.interval
        while True:
            try:
                item = self._updates.get(timeout=max(0.0, next_tick - time.monotonic()))
            except queue.Empty:
                post_server(self.ms_url, self.advert, self.logger)
                next_tick += self.interval
                continue
            if item is _STOP:
                return
            self.advert.players = item
            post_server(self.ms_url, self.advert, self.logger)