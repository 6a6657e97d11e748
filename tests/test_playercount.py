import threading

from athena.playercount import PlayerCount


def test_starts_at_zero():
    assert PlayerCount().count() == 0


def test_add_and_remove():
    pc = PlayerCount()
    pc.add_player()
    pc.add_player()
    pc.remove_player()
    assert pc.count() == 1


def test_remove_below_zero_is_allowed():
    pc = PlayerCount()
    pc.remove_player()
    assert pc.count() == -1


def test_concurrent_adds():
    pc = PlayerCount()
    per_thread = 200
    threads = [
        threading.Thread(target=lambda: [pc.add_player() for _ in range(per_thread)])
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert pc.count() == 8 * per_thread