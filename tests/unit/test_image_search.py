"""Unit tests for university image lookup"""

import httpx
from abroad_budget.infrastructure.clients.image_search import SEARCH_URL, UniversityImageClient

PLACEHOLDER = "/placeholder-university.jpg"
IMAGE_URL = "https://images.example.org/essec-campus.jpg"


def make_client(handler, api_key="key", search_engine_id="cx") -> UniversityImageClient:
    return UniversityImageClient(
        api_key=api_key,
        search_engine_id=search_engine_id,
        placeholder_url=PLACEHOLDER,
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


async def test_find_image_success():
    """First search hit is returned once its URL answers HEAD"""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "GET":
            return httpx.Response(200, json={"items": [{"link": IMAGE_URL}]})
        return httpx.Response(200)

    result = await make_client(handler).find_image("ESSEC", "Paris", "France")

    assert result.url == IMAGE_URL
    assert result.error is None
    search, head = seen
    assert str(search.url).startswith(SEARCH_URL)
    assert search.url.params["q"] == "ESSEC Paris France university campus building"
    assert search.url.params["searchType"] == "image"
    assert search.url.params["safe"] == "active"
    assert head.method == "HEAD"
    assert str(head.url) == IMAGE_URL


async def test_find_image_missing_config_skips_network():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    client = make_client(handler)
    client.api_key = None

    result = await client.find_image("ESSEC", "Paris", "France")

    assert result.url == PLACEHOLDER
    assert result.error == "API configuration is missing"


async def test_find_image_http_error():
    result = await make_client(lambda r: httpx.Response(403)).find_image("ESSEC", "Paris", "France")

    assert result.url == PLACEHOLDER
    assert result.error == "HTTP error! status: 403"


async def test_find_image_no_results():
    result = await make_client(lambda r: httpx.Response(200, json={})).find_image("ESSEC", "Paris", "France")

    assert result.url == PLACEHOLDER
    assert result.error == "No images found"


async def test_find_image_inaccessible_url():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json={"items": [{"link": IMAGE_URL}]})
        return httpx.Response(404)

    result = await make_client(handler).find_image("ESSEC", "Paris", "France")

    assert result.url == PLACEHOLDER
    assert result.error == "Image URL is not accessible"


async def test_find_image_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await make_client(handler).find_image("ESSEC", "Paris", "France")

    assert result.url == PLACEHOLDER
    assert result.error.startswith("Image search request failed")


async def test_find_image_follows_redirect_to_missing_image():
    """A HEAD that redirects to a 404 is not accessible"""
    moved = "https://cdn.example.org/gone.jpg"

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json={"items": [{"link": IMAGE_URL}]})
        if str(request.url) == IMAGE_URL:
            return httpx.Response(301, headers={"Location": moved})
        return httpx.Response(404)

    result = await make_client(handler).find_image("ESSEC", "Paris", "France")

    assert result.url == PLACEHOLDER
    assert result.error == "Image URL is not accessible"


async def test_find_image_follows_redirect_to_live_image():
    moved = "https://cdn.example.org/essec.jpg"

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json={"items": [{"link": IMAGE_URL}]})
        if str(request.url) == IMAGE_URL:
            return httpx.Response(302, headers={"Location": moved})
        return httpx.Response(200)

    result = await make_client(handler).find_image("ESSEC", "Paris", "France")

    assert result.url == IMAGE_URL
    assert result.error is None
