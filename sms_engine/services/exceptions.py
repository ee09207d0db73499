from typing import Any


class SMSServiceError(Exception):
    """Base exception for SMS engine errors.

    ``response`` carries the raw provider payload (or the validation message
    when the request never left the process).
    """

    def __init__(self, message: str, *, response: Any = None):
        super().__init__(message)
        self.response = message if response is None else response


class SMSSendError(SMSServiceError):
    """Base for every error raised by ``send``."""


class InvalidSenderNameException(SMSSendError):
    pass


class InvalidMobileNumberException(SMSSendError):
    pass


class InvalidMessageException(SMSSendError):
    pass


class InsufficientCreditsException(SMSSendError):
    pass


class InvalidApiKeyException(SMSSendError):
    pass


class MaxSmsRecipientReachedException(SMSSendError):
    pass


class SmsSendingException(SMSSendError):
    pass


class InvalidArgumentException(SMSServiceError, ValueError):
    pass


class UnknownSupplierException(SMSServiceError, LookupError):
    pass
