from unittest.mock import MagicMock

import pytest
import requests

from pokedex.client import PokeAPIClient
from pokedex.errors import FetchError

from conftest import BASE_URL, make_http, make_response


@pytest.fixture
def http():
    return MagicMock()


@pytest.fixture
def client(cache, http):
    return PokeAPIClient(cache, base_url=BASE_URL, timeout=5, page_size=20, session=http)


def test_url_builders(client):
    assert client.location_areas_url() == f"{BASE_URL}/location-area/?offset=0&limit=20"
    assert client.location_area_url(" Canalave-City-Area ") == f"{BASE_URL}/location-area/canalave-city-area"
    assert client.pokemon_url("Pikachu") == f"{BASE_URL}/pokemon/pikachu"


def test_base_url_trailing_slash_is_dropped(cache, http):
    client = PokeAPIClient(cache, base_url=BASE_URL + "/", session=http)
    assert client.pokemon_url("mew") == f"{BASE_URL}/pokemon/mew"


def test_miss_fetches_and_caches(client, cache, http):
    url = client.pokemon_url("pikachu")
    http.get.return_value = make_response(200, {"name": "pikachu"})

    fetched = client.fetch(url)

    assert fetched.from_cache is False
    assert fetched.payload == b'{"name": "pikachu"}'
    http.get.assert_called_once_with(url, timeout=5)
    assert cache.get(url) == (b'{"name": "pikachu"}', True)


def test_hit_skips_network(client, cache, http):
    url = client.pokemon_url("pikachu")
    cache.add(url, b'{"name": "pikachu"}')

    fetched = client.fetch(url)

    assert fetched.from_cache is True
    assert fetched.payload == b'{"name": "pikachu"}'
    http.get.assert_not_called()


def test_second_fetch_served_from_cache(cache):
    url = f"{BASE_URL}/pokemon/mew"
    http = make_http({url: {"name": "mew"}})
    client = PokeAPIClient(cache, base_url=BASE_URL, session=http)

    assert client.fetch(url).from_cache is False
    assert client.fetch(url).from_cache is True
    assert http.get.call_count == 1


def test_non_200_raises_and_is_not_cached(client, cache, http):
    url = client.pokemon_url("missingno")
    http.get.return_value = make_response(404, None, reason="Not Found")

    with pytest.raises(FetchError) as exc_info:
        client.fetch(url)

    assert exc_info.value.status_code == 404
    assert exc_info.value.url == url
    assert "404 Not Found" in str(exc_info.value)
    assert cache.get(url)[1] is False


def test_transport_error_raises_fetch_error(client, cache, http):
    url = client.pokemon_url("pikachu")
    http.get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(FetchError, match="connection refused") as exc_info:
        client.fetch(url)

    assert exc_info.value.status_code is None
    assert len(cache) == 0


def test_close_closes_session(client, http):
    client.close()
    http.close.assert_called_once()
