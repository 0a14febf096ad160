"""Analytics services for business logic and data processing."""

from analytics.services.country_map_service import CountryMapService

__all__ = ["CountryMapService"]
