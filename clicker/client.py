# httpx client for a running clicker server + facilitator CLI
import argparse
import json
import sys
from typing import Any, Dict, Optional, Sequence

import httpx

from .config import CLICKER_URL, CLIENT_TIMEOUT
from .models import RevealedResult, SessionStatus, SituationOut


class ClickerClient:
    """
    Thin wrapper over the HTTP routes. Accepts any httpx.Client, so tests
    can hand in FastAPI's TestClient instead of a real connection.
    Non-2xx responses raise httpx.HTTPStatusError.
    """

    def __init__(self, http: Optional[httpx.Client] = None, base_url: str = CLICKER_URL):
        self._owned = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=CLIENT_TIMEOUT)

    def close(self) -> None:
        if self._owned:
            self._http.close()

    def __enter__(self) -> "ClickerClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _get(self, path: str) -> Any:
        resp = self._http.get(path)
        resp.raise_for_status()
        return resp.json()

    def _post(self, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        resp = self._http.post(path, json=payload)
        resp.raise_for_status()
        return resp.json()

    # participant side

    def current(self) -> SituationOut:
        return SituationOut(**self._get("/api/current"))

    def vote(self, reaction: str) -> bool:
        return self._post("/api/click", {"reaction": reaction})["ok"]

    def result(self) -> Optional[RevealedResult]:
        data = self._get("/api/result")
        return None if data is None else RevealedResult(**data)

    # facilitator side

    def show(self) -> RevealedResult:
        return RevealedResult(**self._get("/admin/show"))

    def next(self) -> bool:
        return self._post("/admin/next")["ok"]

    def reset(self) -> bool:
        return self._post("/admin/reset")["ok"]

    def status(self) -> SessionStatus:
        return SessionStatus(**self._get("/admin/status"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="clicker", description="Drive a running clicker server")
    parser.add_argument("--url", default=CLICKER_URL)
    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("current", "result", "show", "next", "reset", "status"):
        sub.add_parser(name)
    vote = sub.add_parser("vote")
    vote.add_argument("reaction")
    args = parser.parse_args(argv)

    with ClickerClient(base_url=args.url) as client:
        try:
            if args.command == "vote":
                out: Any = client.vote(args.reaction)
            else:
                out = getattr(client, args.command)()
        except httpx.HTTPError as e:
            print(f"request failed: {e}", file=sys.stderr)
            return 1

    if hasattr(out, "model_dump"):
        out = out.model_dump()
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
