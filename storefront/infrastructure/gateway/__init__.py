"""Client gateway package — HTTP access to the storefront services."""

from .http_client import ServiceHttpClient
from .service_apis import ProductApi, UserApi, capture
from .health_monitor import HealthMonitor, HealthSnapshot, ServiceHealth
from .client_gateway import ClientGateway

__all__ = [
    "ServiceHttpClient",
    "ProductApi",
    "UserApi",
    "capture",
    "HealthMonitor",
    "HealthSnapshot",
    "ServiceHealth",
    "ClientGateway",
]
