import json
from typing import Dict, Optional
from unittest.mock import MagicMock

import pytest

from pokedex.cache import TimedCache

BASE_URL = "https://pokeapi.test/api/v2"


def make_response(status_code: int = 200, body: Optional[dict] = None, reason: str = "OK"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.content = json.dumps(body).encode() if body is not None else b"Not Found"
    return resp


def make_http(routes: Dict[str, dict]) -> MagicMock:
    """A stand-in requests.Session that serves ``routes`` and 404s everything else."""
    http = MagicMock()

    def get(url, timeout=None):
        if url in routes:
            return make_response(200, routes[url])
        return make_response(404, None, reason="Not Found")

    http.get.side_effect = get
    return http


@pytest.fixture
def cache():
    c = TimedCache(retention=60)
    yield c
    c.close()
