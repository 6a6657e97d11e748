import pytest

from athena.permissions import PERMISSION_FIELD
from athena.settings import (
    Config,
    ConfigError,
    load_config,
    load_file,
    load_music,
    load_roles,
)


def test_defaults():
    conf = Config()
    assert conf.server.port == 27016
    assert conf.server.name == "Unnamed Server"
    assert conf.server.default_ban_duration == "3d"
    assert conf.logging.log_methods == ["stdout"]
    assert conf.master_server.addr == "https://servers.aceattorneyonline.com/servers"


def test_default_lists_are_not_shared():
    a, b = Config(), Config()
    a.logging.log_methods.append("file")
    assert b.logging.log_methods == ["stdout"]


def test_load_overlays_values(tmp_path):
    (tmp_path / "config.toml").write_text(
        '[Server]\nport = 1234\nname = "Test Court"\n'
        '[Logging]\nlog_methods = ["file"]\n'
        '[MasterServer]\nadvertise = true\n'
        '[Discord]\nguild_id = "42"\n',
        encoding="utf-8",
    )
    conf = load_config(tmp_path)
    assert conf.server.port == 1234
    assert conf.server.name == "Test Court"
    assert conf.server.max_players == Config().server.max_players
    assert conf.logging.log_methods == ["file"]
    assert conf.master_server.advertise is True
    assert conf.discord.guild_id == "42"


def test_load_empty_file_keeps_defaults(tmp_path):
    (tmp_path / "config.toml").write_text("", encoding="utf-8")
    assert load_config(tmp_path) == Config()


def test_load_type_mismatch(tmp_path):
    (tmp_path / "config.toml").write_text('[Server]\nport = "abc"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_invalid_toml(tmp_path):
    (tmp_path / "config.toml").write_text("[Server\nport =", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path)


def test_load_music_adds_songs_category(tmp_path):
    (tmp_path / "music.txt").write_text("track.opus\nother.mp3\n", encoding="utf-8")
    assert load_music(tmp_path) == ["Songs", "track.opus", "other.mp3"]


def test_load_music_with_category(tmp_path):
    (tmp_path / "music.txt").write_text("Cat\r\ntrack.opus\r\n", encoding="utf-8")
    assert load_music(tmp_path) == ["Cat", "track.opus"]


def test_load_music_empty(tmp_path):
    (tmp_path / "music.txt").write_text("", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_music(tmp_path)


def test_load_file(tmp_path):
    (tmp_path / "characters.txt").write_text("Phoenix Wright\nMiles Edgeworth", encoding="utf-8")
    assert load_file(tmp_path, "/characters.txt") == ["Phoenix Wright", "Miles Edgeworth"]


def test_load_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path, "/nothing.txt")


def test_load_roles(tmp_path):
    (tmp_path / "roles.toml").write_text(
        '[[Role]]\nname = "mod"\npermissions = ["KICK", "BAN"]\n'
        '[[Role]]\nname = "admin"\npermissions = ["ADMIN"]\n',
        encoding="utf-8",
    )
    roles = load_roles(tmp_path)
    assert [r.name for r in roles] == ["mod", "admin"]
    assert roles[0].get_permissions() == PERMISSION_FIELD["KICK"] | PERMISSION_FIELD["BAN"]
    assert roles[1].get_permissions() == PERMISSION_FIELD["ADMIN"]


def test_load_roles_empty(tmp_path):
    (tmp_path / "roles.toml").write_text("", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_roles(tmp_path)