import pytest
from fastapi.testclient import TestClient

from clicker.catalog import Catalog, Situation, make_answers
from clicker.main import create_app
from clicker.state import SessionState


def small_catalog(n: int = 2) -> Catalog:
    return Catalog(
        Situation(
            f"title {i}",
            f"desc {i}",
            make_answers(f"ld {i}", f"lf {i}", f"df {i}"),
        )
        for i in range(n)
    )


@pytest.fixture
def make_session():
    def factory(n: int = 2) -> SessionState:
        return SessionState(small_catalog(n))
    return factory


@pytest.fixture
def session(make_session) -> SessionState:
    return make_session()


@pytest.fixture
def client(session):
    with TestClient(create_app(session)) as c:
        yield c


@pytest.fixture
def authored_client():
    # no session passed: the app builds the authored catalog on startup
    with TestClient(create_app()) as c:
        yield c
