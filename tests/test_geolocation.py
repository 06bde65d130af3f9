import asyncio

import httpx

from ai_services.geolocation import (
    GeoLocator, format_crisis_resources, get_crisis_resources_by_country
)


def _locator(config, handler):
    return GeoLocator(config, transport=httpx.MockTransport(handler))


def test_location_from_lookup(config):
    def handler(request):
        return httpx.Response(200, json={
            "country": "GB", "region": "England", "city": "London", "timezone": "Europe/London"
        })

    location = asyncio.run(_locator(config, handler).get_user_location())

    assert location.country_code == "GB"
    assert location.city == "London"


def test_any_failure_defaults_to_us(config):
    def server_error(request):
        return httpx.Response(503)

    def network_error(request):
        raise httpx.ConnectError("unreachable", request=request)

    def bad_body(request):
        return httpx.Response(200, text="not json")

    def no_country(request):
        return httpx.Response(200, json={"city": "Nowhere"})

    for handler in (server_error, network_error, bad_body, no_country):
        location = asyncio.run(_locator(config, handler).get_user_location())
        assert location.country_code == "US"
        assert location.country == "United States"


def test_resources_by_country():
    assert get_crisis_resources_by_country("GB").country == "United Kingdom"
    assert get_crisis_resources_by_country("uk").emergency_number == "999"
    assert get_crisis_resources_by_country("NZ").emergency_number == "111"
    assert get_crisis_resources_by_country("ZZ").country == "United States"
    assert get_crisis_resources_by_country(None).country == "United States"


def test_resources_use_lookup_when_no_code_given(config):
    def handler(request):
        return httpx.Response(200, json={"country": "AU"})

    locator = _locator(config, handler)

    assert asyncio.run(locator.get_crisis_resources()).emergency_number == "000"
    assert asyncio.run(locator.get_crisis_resources("CA")).country == "Canada"


def test_formatted_resources_include_contacts():
    text = format_crisis_resources(get_crisis_resources_by_country("US"))

    assert "Emergency services: 911" in text
    assert "Phone: 988" in text
    assert "Crisis Text Line" in text
