from fastapi.testclient import TestClient

from clicker.catalog import NO_ANSWER, Catalog, Situation
from clicker.main import create_app
from clicker.reactions import Reaction, pair_key
from clicker.state import SessionState


def test_current_situation(client):
    r = client.get("/api/current")
    assert r.status_code == 200
    assert r.json() == {"title": "title 0", "description": "desc 0"}


def test_click_acknowledges_known_and_unknown(client, session):
    assert client.post("/api/click", json={"reaction": "freeze"}).json() == {"ok": True}
    assert client.post("/api/click", json={"reaction": "xyz"}).json() == {"ok": True}
    assert session.snapshot().counts == (0, 0, 1)


def test_click_without_reaction_is_422(client):
    assert client.post("/api/click", json={}).status_code == 422


def test_result_is_null_before_reveal(client):
    r = client.get("/api/result")
    assert r.status_code == 200
    assert r.json() is None


def test_show_then_poll(client):
    for reaction in ["lie"] * 5 + ["delay"] * 3 + ["freeze"]:
        client.post("/api/click", json={"reaction": reaction})

    shown = client.get("/admin/show").json()
    assert shown == {
        "situation_title": "title 0",
        "answer": "ld 0",
        "counts": [5, 3, 1],
        "version": 1,
    }
    assert client.get("/api/result").json() == shown

    again = client.get("/admin/show").json()
    assert again["version"] == 2
    assert again["answer"] == shown["answer"]


def test_next_and_reset(client):
    client.post("/api/click", json={"reaction": "lie"})
    client.get("/admin/show")

    assert client.post("/admin/reset").json() == {"ok": True}
    assert client.get("/api/result").json() is None
    assert client.get("/admin/status").json()["counts"] == [0, 0, 0]

    assert client.post("/admin/next").json() == {"ok": True}
    assert client.get("/api/current").json()["title"] == "title 1"
    assert client.post("/admin/next").json() == {"ok": True}
    assert client.get("/api/current").json()["title"] == "title 0"

    assert client.get("/admin/show").json()["version"] == 2


def test_status(client):
    client.post("/api/click", json={"reaction": "delay"})
    assert client.get("/admin/status").json() == {
        "index": 0,
        "total": 2,
        "title": "title 0",
        "counts": [0, 1, 0],
        "revealed": False,
        "version": 0,
    }


def test_pages(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/ui/"

    page = client.get("/")
    assert page.status_code == 200
    assert "/api/click" in page.text

    admin = client.get("/admin")
    assert admin.status_code == 200
    assert "/admin/show" in admin.text


def test_app_builds_authored_catalog(authored_client):
    status = authored_client.get("/admin/status").json()
    assert status["total"] >= 3
    assert status["index"] == 0


def test_config_serves_poll_interval(client, monkeypatch):
    monkeypatch.setattr("clicker.main.POLL_INTERVAL_MS", 250)
    assert client.get("/api/config").json() == {"poll_interval_ms": 250}

    assert "/api/config" in client.get("/").text


def test_show_on_lenient_catalog_falls_back():
    partial = Situation("partial", "d", {pair_key(Reaction.LIE, Reaction.DELAY): "ld"})
    session = SessionState(Catalog([partial], strict=False))
    with TestClient(create_app(session)) as c:
        c.post("/api/click", json={"reaction": "freeze"})
        shown = c.get("/admin/show").json()
    assert shown["answer"] == NO_ANSWER
    assert shown["counts"] == [0, 0, 1]
    assert shown["version"] == 1
