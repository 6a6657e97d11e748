# athena

Building blocks for an Attorney Online 2 server.

## Modules

- `athena.packet`: `parse_packet(data)` turns raw AO2 packet data, without
  the closing `%`, into a `Packet` with a `header` and a `body` list.
  `str(packet)` gives back the wire form, `HEADER#a#b#%`. An empty or
  blank header raises `PacketError`.
- `athena.permissions`: `Role` holds a `name` and a list of permission
  names; `Role.from_dict(data)` builds one from a mapping, and
  `Role.get_permissions()` folds the names into a bit mask (unknown names
  add nothing). `PERMISSION_FIELD` maps names such as `CM`, `KICK`, `BAN`
  and `ADMIN` to their bits. `has_permission(perm, required)` checks that
  every required bit is set; `is_moderator(perm)` is true when any bit
  beyond `CM` is set.
- `athena.playercount`: `PlayerCount` is a thread-safe counter with
  `count()`, `add_player()` and `remove_player()`.
- `athena.sliceutil`: `contains(container, value)`.
- `athena.uidmanager`: `UidManager` hands out the lowest free user ID.
  `init_heap(players)` fills the pool with `0` to `players - 1`,
  `get_uid()` takes the lowest one (raising `IndexError` when none is
  left), `release_uid(uid)` gives one back, and `len()` counts free IDs.
- `athena.webhook`: `DiscordWebhook` posts modcalls
  (`post_modcall(character, area, reason)`) and report files
  (`post_report(name, contents)`) to a Discord webhook URL, with an
  optional role ping on modcalls. With an empty `url` posts do nothing.
  A failed request or a non-success HTTP status raises `WebhookError`.
- `athena.logger`: `Logger` writes lines of the form
  `Jan  2 15:04:05.000: INFO: message` to standard output (or a given
  `stream`) and, with `log_file`, appends them to `server.log` in
  `log_path`. Messages below `level` (a `LogLevel`) are dropped.
  `write_audit(line)` appends a dated line to `audit.log`;
  `write_report(name, buffer)` posts the lines to the logger's webhook, if
  it has one, and saves them as `report-<timestamp>-<name>.log`. With
  `enable_area_logging`, `create_area_log_directory(area_name)` and
  `write_area_log(area_name, entry)` keep a daily file per area;
  `sanitize_area_name(name)` replaces characters that are unsafe in
  folder names with `_`.
- `athena.ms`: `Advertisement` describes the server to the master server
  (`to_json()` gives the request body); `post_server(ms_url, advert,
  logger)` sends it once and logs failures. `Advertiser` posts it in a
  background thread on `start()`, every five minutes, and on each
  `update_players(players)`, until `stop()`.
- `athena.settings`: `load_config(config_path)` reads `config.toml` over
  the built-in defaults into a `Config` with `server`, `logging`,
  `master_server` and `discord` sections. `load_music`, `load_file` and
  `load_roles` read `music.txt`, any other server file and `roles.toml`.
  Malformed TOML, values of the wrong type and an empty music or role
  list raise `ConfigError`; a missing file raises the usual `OSError`.

## Example

```python
from athena.packet import parse_packet
from athena.uidmanager import UidManager

packet = parse_packet("HI#hdid#")
print(packet.header, packet.body)   # HI ['hdid']
print(packet)                       # HI#hdid#%

uids = UidManager()
uids.init_heap(100)
uid = uids.get_uid()                # 0
uids.release_uid(uid)
```

## What this package does not do

It has no server of its own: nothing here listens for clients, keeps
areas, characters or evidence, handles incoming packets or runs
moderator commands, and there is no command to start. Area definitions
are not read from the configuration directory either. The modules above
are the pieces such a server is built from.

## Tests

```
pip install -e .[test]
pytest
```