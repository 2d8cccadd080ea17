"""
Places client tests against a mocked HTTP transport.
"""
import httpx
import pytest

from app.config.settings import PlacesSettings
from app.core.exceptions import ExternalSourceError, ResponseParseError
from app.models.internal_models import Coordinate
from app.services.places_client import PlacesClient

CBD = Coordinate(-37.8136, 144.9631)

RESULTS = [
    {
        "name": "Pellegrini's Espresso Bar",
        "geometry": {"location": {"lat": -37.8111, "lng": 144.9714}},
        "types": ["cafe", "food"],
        "rating": 4.5,
        "opening_hours": {"open_now": True},
        "formatted_address": "66 Bourke St, Melbourne",
    },
    {"name": "No location", "geometry": {}},
    {
        "name": "Florentino",
        "geometry": {"location": {"lat": -37.8113, "lng": 144.9710}},
    },
]


def make_client(handler, **settings):
    settings.setdefault("api_key", "test-key")
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return PlacesClient(settings=PlacesSettings(**settings), http_client=http_client)


@pytest.mark.asyncio
async def test_search_text_parses_results():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"status": "OK", "results": RESULTS})

    client = make_client(handler)
    places = await client.search_text("Bourke Street cafes", CBD, 2.0, default_category="dining")

    assert seen["path"] == "/maps/api/place/textsearch/json"
    assert seen["params"]["query"] == "Bourke Street cafes"
    assert seen["params"]["location"] == "-37.8136,144.9631"
    assert seen["params"]["radius"] == "2000"
    assert seen["params"]["key"] == "test-key"

    assert [p.name for p in places] == ["Pellegrini's Espresso Bar", "Florentino"]
    first, second = places
    assert first.coordinate == Coordinate(-37.8111, 144.9714)
    assert first.category == "cafe"
    assert first.rating == 4.5
    assert first.open_now is True
    assert first.address == "66 Bourke St, Melbourne"
    assert second.category == "dining"
    assert second.rating is None
    assert second.open_now is None


@pytest.mark.asyncio
async def test_search_text_respects_limit():
    def handler(request):
        return httpx.Response(200, json={"status": "OK", "results": RESULTS})

    client = make_client(handler, max_results=1)
    places = await client.search_text("cafes", CBD, 1.0)
    assert len(places) == 1


@pytest.mark.asyncio
async def test_zero_results_is_empty_not_error():
    def handler(request):
        return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})

    assert await make_client(handler).search_text("nothing", CBD, 1.0) == []


@pytest.mark.asyncio
async def test_error_status_raises():
    def handler(request):
        return httpx.Response(200, json={"status": "REQUEST_DENIED", "error_message": "bad key"})

    with pytest.raises(ExternalSourceError, match="REQUEST_DENIED"):
        await make_client(handler).search_text("cafes", CBD, 1.0)


@pytest.mark.asyncio
async def test_http_error_raises():
    def handler(request):
        return httpx.Response(500, text="boom")

    with pytest.raises(ExternalSourceError):
        await make_client(handler).search_text("cafes", CBD, 1.0)


@pytest.mark.asyncio
async def test_non_json_body_raises_parse_error():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(ResponseParseError):
        await make_client(handler).search_text("cafes", CBD, 1.0)


@pytest.mark.asyncio
async def test_missing_api_key_skips_request():
    def handler(request):
        raise AssertionError("no request expected")

    client = make_client(handler, api_key=None)
    assert await client.search_text("cafes", CBD, 1.0) == []


MALFORMED = [
    {"name": "List geometry", "geometry": [{"lat": -37.81, "lng": 144.97}]},
    {"name": "Text latitude", "geometry": {"location": {"lat": "n/a", "lng": 144.97}}},
    {"name": "Null longitude", "geometry": {"location": {"lat": -37.81, "lng": None}}},
    "not a place",
    {
        "name": "Odd fields",
        "geometry": {"location": {"lat": "-37.8120", "lng": "144.9650"}},
        "types": "bar",
        "rating": "excellent",
        "opening_hours": ["9-5"],
    },
]


@pytest.mark.asyncio
async def test_malformed_results_are_skipped():
    def handler(request):
        return httpx.Response(200, json={"status": "OK", "results": MALFORMED})

    places = await make_client(handler).search_text("cafes", CBD, 1.0, default_category="dining")

    assert [p.name for p in places] == ["Odd fields"]
    odd = places[0]
    assert odd.coordinate == Coordinate(-37.8120, 144.9650)
    # a bare string is not a type list
    assert odd.category == "dining"
    assert odd.rating is None
    assert odd.open_now is None
