from restaurant_site.client.api_client import ApiClient, ApiError
from restaurant_site.client.resources import RestaurantApi
from restaurant_site.client.tokens import TokenStore

__all__ = ["ApiClient", "ApiError", "RestaurantApi", "TokenStore"]
