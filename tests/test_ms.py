import io
import json
import time

import requests
import responses

from athena.logger import Logger
from athena.ms import Advertisement, Advertiser, post_server

MS_URL = "https://servers.aceattorneyonline.com/servers"


def _advert(**kw):
    base = dict(port=27016, name="Unnamed Server", desc="A court", players=3)
    base.update(kw)
    return Advertisement(**base)


def test_to_json_omits_empty_optional_fields():
    data = json.loads(_advert().to_json())
    assert data == {"port": 27016, "players": 3, "name": "Unnamed Server", "description": "A court"}


def test_to_json_includes_set_optional_fields():
    data = json.loads(_advert(ip="host.example.com", ws_port=27017, wss_port=443).to_json())
    assert data["ip"] == "host.example.com"
    assert data["ws_port"] == 27017
    assert data["wss_port"] == 443


def test_to_json_is_compact_and_ordered():
    text = _advert(ip="h", ws_port=1, wss_port=2).to_json()
    assert " " not in text.replace("A court", "").replace("Unnamed Server", "")
    keys = list(json.loads(text))
    assert keys == ["ip", "port", "ws_port", "wss_port", "players", "name", "description"]


def test_post_server_sends_json():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, MS_URL, status=200)
        post_server(MS_URL, _advert())
        request = rsps.calls[0].request
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.body) == json.loads(_advert().to_json())


def test_post_server_logs_failure():
    out = io.StringIO()
    logger = Logger(stream=out)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, MS_URL, body=requests.ConnectionError("down"))
        post_server(MS_URL, _advert(), logger)
    assert "Failed to post advertisement" in out.getvalue()


def test_advertiser_posts_on_start_and_update():
    advert = _advert(players=0)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, MS_URL, status=200)
        adv = Advertiser(MS_URL, advert)
        adv.start()
        adv.update_players(5)
        adv.stop()
        bodies = [json.loads(c.request.body) for c in rsps.calls]
    assert [b["players"] for b in bodies] == [0, 5]
    assert advert.players == 0


def test_advertiser_posts_periodically():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, MS_URL, status=200)
        adv = Advertiser(MS_URL, _advert(), interval=0.05)
        adv.start()
        time.sleep(0.3)
        adv.stop()
        assert len(rsps.calls) >= 3