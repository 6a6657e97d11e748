"""Reading the server's configuration files."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from athena.permissions import Role


class ConfigError(ValueError):
    """Raised when a configuration file has invalid content."""


@dataclass
class ServerConfig:
    addr: str = ""
    port: int = 27016
    advertise_hostname: str = ""
    name: str = "Unnamed Server"
    description: str = ""
    max_players: int = 100
    max_message_length: int = 256
    default_ban_duration: str = "3d"
    enable_webao: bool = False
    webao_port: int = 27017
    enable_webao_secure: bool = False
    webao_secure_port: int = 443
    tls_cert_path: str = ""
    tls_key_path: str = ""
    reverse_proxy_mode: bool = False
    reverse_proxy_http_port: int = 80
    reverse_proxy_https_port: int = 443
    multiclient_limit: int = 16
    asset_url: str = ""
    webhook_url: str = ""
    webhook_ping_role_id: str = ""
    max_dice: int = 100
    max_sides: int = 100
    motd: str = ""
    max_testimony: int = 10
    message_rate_limit: int = 20
    message_rate_limit_window: int = 10
    modcall_cooldown: int = 0


@dataclass
class LogConfig:
    log_buffer_size: int = 150
    log_level: str = "info"
    log_directory: str = "logs"
    log_methods: list[str] = field(default_factory=lambda: ["stdout"])
    enable_area_logging: bool = False


@dataclass
class MSConfig:
    advertise: bool = False
    addr: str = "https://servers.aceattorneyonline.com/servers"


@dataclass
class DiscordConfig:
    bot_token: str = ""
    guild_id: str = ""
    mod_role_id: str = ""


_SECTIONS = {
    "Server": "server",
    "Logging": "logging",
    "MasterServer": "master_server",
    "Discord": "discord",
}


def _checked(section: str, key: str, current: Any, value: Any) -> Any:
    if isinstance(current, bool):
        ok = isinstance(value, bool)
    elif isinstance(current, int):
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif isinstance(current, str):
        ok = isinstance(value, str)
    elif isinstance(current, list):
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
        value = list(value) if ok else value
    else:
        ok = True
    if not ok:
        raise ConfigError(
            f"{section}.{key}: expected {type(current).__name__}, got {type(value).__name__}"
        )
    return value


def _apply(target: Any, section: str, table: Any) -> None:
    if not isinstance(table, dict):
        raise ConfigError(f"{section}: expected a table")
    for f in fields(target):
        if f.name in table:
            current = getattr(target, f.name)
            setattr(target, f.name, _checked(section, f.name, current, table[f.name]))


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc


def _read_lines(path: Path) -> list[str]:
    with open(path, encoding="utf-8", newline="") as f:
        lines = f.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Config:
    """The server's main configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LogConfig = field(default_factory=LogConfig)
    master_server: MSConfig = field(default_factory=MSConfig)
    discord: DiscordConfig = field(default_factory=DiscordConfig)

    def load(self, config_path: str | os.PathLike[str]) -> None:
        """Overlay the values of config.toml in config_path onto this config."""
        data = _read_toml(Path(config_path) / "config.toml")
        for section, attr in _SECTIONS.items():
            if section in data:
                _apply(getattr(self, attr), section, data[section])


def load_config(config_path: str | os.PathLike[str]) -> Config:
    """Return the defaults overlaid with config.toml from config_path."""
    conf = Config()
    conf.load(config_path)
    return conf


def load_music(config_path: str | os.PathLike[str]) -> list[str]:
    """Read music.txt; a 'Songs' category is added if the list starts with a song."""
    music = _read_lines(Path(config_path) / "music.txt")
    if not music:
        raise ConfigError("empty musiclist")
    if "." in music[0]:
        music.insert(0, "Songs")
    return music


def load_file(config_path: str | os.PathLike[str], file: str) -> list[str]:
    """Read a server file in config_path and return its lines."""
    return _read_lines(Path(config_path) / file.lstrip("/\\"))


def load_roles(config_path: str | os.PathLike[str]) -> list[Role]:
    """Read the roles from roles.toml."""
    data = _read_toml(Path(config_path) / "roles.toml")
    tables = data.get("Role", [])
    if not isinstance(tables, list):
        raise ConfigError("Role: expected an array of tables")
    roles = [Role.from_dict(t) for t in tables]
    if not roles:
        raise ConfigError("empty rolelist")
    return roles