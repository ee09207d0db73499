"""Send SMS through interchangeable third-party gateways."""

from .core.phone import is_valid_mobile, normalize_mobile
from .services.engine import SupplierRegistry, get_suppliers, init, init_from_settings, register_supplier
from .services.exceptions import (
    InsufficientCreditsException,
    InvalidApiKeyException,
    InvalidArgumentException,
    InvalidMessageException,
    InvalidMobileNumberException,
    InvalidSenderNameException,
    MaxSmsRecipientReachedException,
    SMSSendError,
    SMSServiceError,
    SmsSendingException,
    UnknownSupplierException,
)
from .services.sms_providers import (
    ApiCredentials,
    BaseSMSProvider,
    MyBusyBeeSMSProvider,
    SemaphoreSMSProvider,
)

__all__ = [
    "is_valid_mobile",
    "normalize_mobile",
    "SupplierRegistry",
    "get_suppliers",
    "init",
    "init_from_settings",
    "register_supplier",
    "ApiCredentials",
    "BaseSMSProvider",
    "MyBusyBeeSMSProvider",
    "SemaphoreSMSProvider",
    "InsufficientCreditsException",
    "InvalidApiKeyException",
    "InvalidArgumentException",
    "InvalidMessageException",
    "InvalidMobileNumberException",
    "InvalidSenderNameException",
    "MaxSmsRecipientReachedException",
    "SMSSendError",
    "SMSServiceError",
    "SmsSendingException",
    "UnknownSupplierException",
]
