from .base import MAX_RECIPIENTS, ApiCredentials, BaseSMSProvider, validate_send_request
from .mybusybee_client import MyBusyBeeClient
from .mybusybee_provider import MyBusyBeeSMSProvider
from .semaphore_client import SemaphoreClient
from .semaphore_provider import SemaphoreSMSProvider

__all__ = [
    "MAX_RECIPIENTS",
    "ApiCredentials",
    "BaseSMSProvider",
    "validate_send_request",
    "MyBusyBeeClient",
    "MyBusyBeeSMSProvider",
    "SemaphoreClient",
    "SemaphoreSMSProvider",
]
