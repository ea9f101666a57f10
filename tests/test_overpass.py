"""
Tests for the Overpass API client
"""

from unittest.mock import patch

import pytest
import requests

from osmkit.config import ClientConfig, OverpassConfig, get_config
from osmkit.exceptions import TransportError
from osmkit.overpass import api_client
from osmkit.overpass.api_client import OverpassClient, ResponseFormat


URL = "https://lz4.overpass-api.de/api/interpreter"


def test_query_gets_trailing_semicolon():
    query = OverpassClient.construct_ql_query('node["a"="b"]', ResponseFormat.XML, "body")
    assert query == '[out:xml];node["a"="b"];out body;'


def test_query_keeps_single_semicolon():
    query = OverpassClient.construct_ql_query('node["a"="b"];', ResponseFormat.JSON, "ids")
    assert query == '[out:json];node["a"="b"];out ids;'


def test_query_is_trimmed():
    query = OverpassClient.construct_ql_query('  node(1);\n', ResponseFormat.CSV, "skel")
    assert query == "[out:csv];node(1);out skel;"


@pytest.mark.parametrize("response_format, literal", [
    (ResponseFormat.GEOJSON, "geojson"),
    (ResponseFormat.JSON, "json"),
    (ResponseFormat.XML, "xml"),
    (ResponseFormat.CSV, "csv"),
])
def test_response_format_literals(response_format, literal):
    assert response_format.value == literal


def test_defaults_from_config():
    client = OverpassClient()
    assert client.url == "https://overpass-api.de/api/interpreter"
    assert client.timeout == 180


def test_get_wraps_query(response_factory):
    client = OverpassClient(URL, 200)
    with patch.object(api_client.requests, "post", return_value=response_factory("<osm/>")) as post:
        assert client.get('node["sport"="free_flying"]', ResponseFormat.XML, "body", True) == "<osm/>"

    args, kwargs = post.call_args
    assert args[0] == URL
    assert kwargs["data"] == b'[out:xml];node["sport"="free_flying"];out body;'
    assert kwargs["timeout"] == 200


def test_get_sends_raw_query(response_factory):
    client = OverpassClient(URL, 30)
    raw = "[out:json];way(1);out geom;"
    with patch.object(api_client.requests, "post", return_value=response_factory("{}")) as post:
        client.get(raw, ResponseFormat.XML, "body", pure_query=False)

    assert post.call_args[1]["data"] == raw.encode("utf-8")


@pytest.mark.parametrize("status_code", [400, 429, 504])
def test_get_returns_body_on_error_status(response_factory, status_code):
    client = OverpassClient(URL, 30)
    response = response_factory("rate limited", status_code=status_code)
    with patch.object(api_client.requests, "post", return_value=response):
        assert client.get("node(1)") == "rate limited"


@pytest.mark.parametrize("error", [
    requests.exceptions.Timeout("slow"),
    requests.exceptions.ConnectionError("refused"),
])
def test_get_transport_errors(error):
    client = OverpassClient(URL, 1)
    with patch.object(api_client.requests, "post", side_effect=error):
        with pytest.raises(TransportError):
            client.get("node(1)")


def test_injected_config(response_factory):
    config = ClientConfig(
        overpass=OverpassConfig(url=URL, timeout=15, verbosity="skel"),
        user_agent="benches/2.0"
    )
    client = OverpassClient(config=config)
    assert client.url == URL
    assert client.timeout == 15

    with patch.object(api_client.requests, "post", return_value=response_factory("<osm/>")) as post:
        client.get("node(1)")

    kwargs = post.call_args[1]
    assert kwargs["data"] == b"[out:xml];node(1);out skel;"
    assert kwargs["headers"]["User-Agent"] == "benches/2.0"
    assert kwargs["timeout"] == 15
    assert get_config().user_agent != "benches/2.0"
