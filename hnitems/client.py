import logging
from typing import Any, List, Optional

import requests

from hnitems.config import DEFAULT_BASE_URL, Settings
from hnitems.decoder import decode
from hnitems.errors import TransportError
from hnitems.schemas import Item, id_list_schema, item_schema

log = logging.getLogger(__name__)

STORY_LISTS = ("top", "new", "best", "ask", "show", "job")


class HttpSession:
    """GET-and-parse over a shared requests.Session. No retries."""

    def __init__(self, timeout: Optional[float] = None):
        self.session = requests.Session()
        self.timeout = timeout

    def get_json(self, url: str) -> Any:
        log.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"GET {url} returned a body that is not JSON: {e}") from e


class HackerNewsClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.http = HttpSession(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HackerNewsClient":
        return cls(base_url=settings.base_url, timeout=settings.timeout)

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    def _get_json(self, path: str) -> Any:
        return self.http.get_json(self._url(path))

    # ---- list endpoints: arrays of item ids
    def stories(self, kind: str = "top") -> List[int]:
        if kind not in STORY_LISTS:
            raise ValueError(f"unknown story list {kind!r}, expected one of {', '.join(STORY_LISTS)}")
        name = f"{kind}stories"
        data = self._get_json(f"/{name}.json")
        return list(decode(id_list_schema, data, name=name))

    def top_stories(self) -> List[int]:
        return self.stories("top")

    # ---- item endpoint: a single decoded item
    def item(self, id: int) -> Item:
        id = int(id)
        data = self._get_json(f"/item/{id}.json")
        return decode(item_schema, data, name="item", subject=f"item {id}")
