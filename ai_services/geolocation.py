from typing import Optional

import httpx

from ai_services.resource_library import COUNTRY_ALIASES, CRISIS_RESOURCES_BY_COUNTRY
from config import Config
from database.models import CrisisResources, GeoLocation
from utils.logger import logger

DEFAULT_LOCATIONS = {
    'US': GeoLocation(country='United States', country_code='US'),
}


def normalize_country_code(country_code: Optional[str]) -> str:
    """Upper-case the code and map aliases such as GB onto their table"""
    code = (country_code or '').strip().upper()
    return COUNTRY_ALIASES.get(code, code)


def get_crisis_resources_by_country(country_code: Optional[str], default_code: str = 'US') -> CrisisResources:
    """Crisis hotlines for the country, falling back to the default table"""
    code = normalize_country_code(country_code)
    if code in CRISIS_RESOURCES_BY_COUNTRY:
        return CRISIS_RESOURCES_BY_COUNTRY[code]
    return CRISIS_RESOURCES_BY_COUNTRY.get(normalize_country_code(default_code), CRISIS_RESOURCES_BY_COUNTRY['US'])


def format_crisis_resources(resources: CrisisResources) -> str:
    """Render a country's crisis contacts as chat text"""
    lines = [
        f"Crisis support in {resources.country}",
        f"Emergency services: {resources.emergency_number}",
    ]

    for contact in resources.resources:
        lines.append("")
        lines.append(contact.name)
        lines.append(contact.description)
        if contact.phone:
            lines.append(f"Phone: {contact.phone}")
        if contact.sms:
            lines.append(f"Text: {contact.sms}")
        if contact.chat:
            lines.append(f"Chat: {contact.chat}")
        if contact.email:
            lines.append(f"Email: {contact.email}")
        if contact.hours:
            lines.append(f"Hours: {contact.hours}")
        lines.append(f"Website: {contact.website}")

    return "\n".join(lines)


class GeoLocator:
    """IP geolocation lookup used to pick a crisis hotline table"""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = config.geolocation_url
        self.timeout = config.geolocation_timeout
        self.default_code = config.default_country_code
        self.transport = transport

    def default_location(self) -> GeoLocation:
        code = normalize_country_code(self.default_code)
        if code in DEFAULT_LOCATIONS:
            return DEFAULT_LOCATIONS[code]
        resources = CRISIS_RESOURCES_BY_COUNTRY.get(code)
        if resources is None:
            return DEFAULT_LOCATIONS['US']
        return GeoLocation(country=resources.country, country_code=code)

    async def get_user_location(self) -> GeoLocation:
        """Look up the host's location; any failure returns the default country"""
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                data = response.json()

            country = data.get('country')
            if not country:
                raise ValueError("Location response has no country")

            return GeoLocation(
                country=country,
                country_code=country,
                region=data.get('region'),
                city=data.get('city'),
                timezone=data.get('timezone'),
            )

        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.error("Error getting user location", error=e)
            return self.default_location()

    async def get_crisis_resources(self, country_code: Optional[str] = None) -> CrisisResources:
        """Resources for an explicit code, or for the looked-up location"""
        if not country_code:
            location = await self.get_user_location()
            country_code = location.country_code
        return get_crisis_resources_by_country(country_code, self.default_code)
