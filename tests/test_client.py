import httpx
import pytest

from clicker.client import ClickerClient, main


def test_client_round_trip(client):
    c = ClickerClient(client)
    assert c.current().title == "title 0"
    assert c.result() is None

    assert c.vote("freeze") is True
    assert c.vote("bogus") is True
    assert c.status().counts == (0, 0, 1)

    shown = c.show()
    assert shown.answer == "lf 0"
    assert shown.version == 1
    assert c.result() == shown

    assert c.next() is True
    assert c.current().title == "title 1"
    assert c.result() is None

    c.vote("lie")
    assert c.reset() is True
    assert c.status().counts == (0, 0, 0)
    assert c.status().version == 1


def test_client_does_not_close_borrowed_http(client):
    with ClickerClient(client) as c:
        c.current()
    assert client.get("/api/current").status_code == 200


def test_client_raises_on_http_error(client):
    c = ClickerClient(client)
    with pytest.raises(httpx.HTTPStatusError):
        c._get("/no/such/route")


def test_cli_reports_unreachable_server(capsys):
    assert main(["--url", "http://127.0.0.1:9", "status"]) == 1
    assert "request failed" in capsys.readouterr().err


def test_cli_accepts_tuple_argv(capsys):
    assert main(("--url", "http://127.0.0.1:9", "show")) == 1
    assert "request failed" in capsys.readouterr().err
