from datetime import date

import httpx
import pytest
import respx
from httpx import Response

from app.services.destinations import DestinationResolver
from app.services.hotels import HotelService
from app.services.makcorps import MakcorpsService

MAKCORPS_URL = "https://api.makcorps.com/hotels"
CHECK_IN = date(2026, 6, 1)
CHECK_OUT = date(2026, 6, 3)


@pytest.fixture
def resolver():
    return DestinationResolver()


@pytest.fixture
def service(resolver):
    client = httpx.AsyncClient()
    return HotelService(resolver, MakcorpsService(client, "test-key"))


@respx.mock(assert_all_called=False)
async def test_blank_city_fails_fast_without_network(service):
    route = respx.post(MAKCORPS_URL).mock(return_value=Response(200, json={"hotels": []}))

    result = await service.fetch_hotels("   ", CHECK_IN, CHECK_OUT)

    assert result.success is False
    assert result.error == "City is required"
    assert result.hotels == []
    assert result.fallback is False
    assert not route.called


@respx.mock
async def test_success_normalizes_records(service):
    respx.post(MAKCORPS_URL).mock(
        return_value=Response(
            200,
            json={
                "hotels": [
                    {"hotelId": "a1", "hotelName": "Alfama Inn", "totalPrice": "95", "starRating": 4.1},
                    {"id": "a2", "name": "Bairro Suites", "price": {"amount": 140, "currency": "EUR"}},
                ]
            },
        )
    )

    result = await service.fetch_hotels("Lisbon", CHECK_IN, CHECK_OUT)

    assert result.success is True
    assert result.fallback is False
    assert result.city == "Lisbon"
    assert result.total_results == 2
    assert [h.id for h in result.hotels] == ["a1", "a2"]
    assert result.hotels[0].currency == "USD"
    assert result.hotels[1].currency == "EUR"
    assert result.hotels[1].rating == 4.0
    assert result.error is None


@respx.mock
async def test_upstream_500_returns_curated_fallback(service, resolver):
    respx.post(MAKCORPS_URL).mock(return_value=Response(500, text="boom"))

    result = await service.fetch_hotels("Paris", CHECK_IN, CHECK_OUT)

    assert result.success is False
    assert result.fallback is True
    assert result.hotels
    assert result.hotels == resolver.resolve("Paris")
    assert result.total_results == len(result.hotels)
    assert "500" in result.error
    assert "boom" in result.error


@respx.mock
async def test_transport_error_returns_fallback(service):
    respx.post(MAKCORPS_URL).mock(side_effect=httpx.ReadTimeout("timeout"))

    result = await service.fetch_hotels("Zanzibar", CHECK_IN, CHECK_OUT)

    assert result.success is False
    assert result.fallback is True
    assert len(result.hotels) == 3
    assert result.error


@respx.mock
async def test_upstream_error_is_logged_with_traceback(service, caplog):
    respx.post(MAKCORPS_URL).mock(return_value=Response(503, text="down"))

    with caplog.at_level("ERROR", logger="app.services.hotels"):
        await service.fetch_hotels("Paris", CHECK_IN, CHECK_OUT)

    [record] = caplog.records
    assert record.exc_info is not None
    assert "Paris" in record.getMessage()


@respx.mock
async def test_empty_upstream_list_uses_curated_data(service):
    respx.post(MAKCORPS_URL).mock(return_value=Response(200, json={"hotels": []}))

    result = await service.fetch_hotels("Tokyo", CHECK_IN, CHECK_OUT)

    assert result.success is True
    assert result.fallback is True
    assert [h.id for h in result.hotels] == ["tokyo-1", "tokyo-2"]


async def test_missing_api_key_uses_fallback(resolver):
    service = HotelService(resolver, makcorps=None)

    result = await service.fetch_hotels("Rome", CHECK_IN, CHECK_OUT)

    assert result.success is False
    assert result.fallback is True
    assert result.error == "MAKCORPS_API_KEY not configured"
    assert [h.id for h in result.hotels] == ["rome-1", "rome-2"]


@respx.mock
async def test_default_limit_is_forwarded(resolver):
    route = respx.post(MAKCORPS_URL).mock(return_value=Response(200, json={"hotels": []}))
    async with httpx.AsyncClient() as client:
        service = HotelService(resolver, MakcorpsService(client, "k"), default_limit=25)
        await service.fetch_hotels("Oslo", CHECK_IN, CHECK_OUT)

    assert b'"limit":25' in route.calls.last.request.content.replace(b" ", b"")
