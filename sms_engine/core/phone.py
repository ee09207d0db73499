import re

# Philippine mobile numbers: "9" followed by nine subscriber digits.
_SUBSCRIBER_RE = re.compile(r"9[0-9]{9}")
_ALLOWED_RE = re.compile(r"\+?[0-9 \t().\-]+")
_FORMATTING_RE = re.compile(r"[ \t().\-]")

COUNTRY_CODE = "63"


def normalize_mobile(phone: str | None) -> str | None:
    """Return the canonical ``639XXXXXXXXX`` form of a mobile number.

    Accepts ``09XXXXXXXXX``, ``9XXXXXXXXX`` and ``639XXXXXXXXX`` (optionally
    with a leading ``+``) with spaces, dashes, dots or parentheses in between.
    Returns ``None`` instead of raising so callers can decide how to report
    the bad entry.
    """
    if not isinstance(phone, str):
        return None
    text = phone.strip()
    if not text or not _ALLOWED_RE.fullmatch(text):
        return None

    digits = _FORMATTING_RE.sub("", text).lstrip("+")

    if len(digits) == 12 and digits.startswith(COUNTRY_CODE):
        subscriber = digits[2:]
    elif len(digits) == 11 and digits.startswith("0"):
        subscriber = digits[1:]
    elif len(digits) == 10:
        subscriber = digits
    else:
        return None

    if not _SUBSCRIBER_RE.fullmatch(subscriber):
        return None
    return f"{COUNTRY_CODE}{subscriber}"


def is_valid_mobile(phone: str | None) -> bool:
    return normalize_mobile(phone) is not None
