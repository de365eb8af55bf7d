import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from .catalog import build_catalog
from .config import HOST, LOG_LEVEL, POLL_INTERVAL_MS, PORT, STRICT_CATALOG
from .models import Ack, ClientConfig, RevealedResult, SessionStatus, SituationOut, VoteIn
from .state import SessionState

logger = logging.getLogger(__name__)

UI_DIR = Path(__file__).parent / "ui"


def get_session(request: Request) -> SessionState:
    return request.app.state.session


def create_app(session: Optional[SessionState] = None) -> FastAPI:
    """
    Build the HTTP shell around one SessionState. When no session is
    given, one is created from the authored catalog at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "session", None) is None:
            app.state.session = SessionState(build_catalog(strict=STRICT_CATALOG))
        logger.info("Clicker ready with %d situations", len(app.state.session.catalog))
        yield
        # Shutdown: state is in memory only, nothing to flush

    app = FastAPI(title="Corporate Clicker", lifespan=lifespan)
    app.state.session = session

    app.mount("/ui", StaticFiles(directory=UI_DIR, html=True), name="ui")

    @app.get("/")
    def root():
        return RedirectResponse(url="/ui/")

    @app.get("/admin")
    def admin_page():
        return RedirectResponse(url="/ui/admin.html")

    # ----------- participant API -----------

    @app.get("/api/config")
    def client_config() -> ClientConfig:
        return ClientConfig(poll_interval_ms=POLL_INTERVAL_MS)

    @app.get("/api/current")
    def current(st: SessionState = Depends(get_session)) -> SituationOut:
        return st.current_situation()

    @app.post("/api/click")
    def click(v: VoteIn, st: SessionState = Depends(get_session)) -> Ack:
        # unknown reactions are dropped but still acknowledged
        st.accept_vote(v.reaction)
        return Ack()

    @app.get("/api/result")
    def result(st: SessionState = Depends(get_session)) -> Optional[RevealedResult]:
        return st.current_result()

    # ----------- facilitator API -----------

    @app.get("/admin/show")
    def show(st: SessionState = Depends(get_session)) -> RevealedResult:
        return st.reveal()

    @app.post("/admin/next")
    def next_situation(st: SessionState = Depends(get_session)) -> Ack:
        st.advance()
        return Ack()

    @app.post("/admin/reset")
    def reset(st: SessionState = Depends(get_session)) -> Ack:
        st.reset_round()
        return Ack()

    @app.get("/admin/status")
    def status(st: SessionState = Depends(get_session)) -> SessionStatus:
        return st.snapshot()

    return app


app = create_app()


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("clicker.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
