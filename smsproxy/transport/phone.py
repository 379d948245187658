"""
Reference phone number utility.

Hosts normally supply their own PhoneNumberUtilities; this one is enough
for local runs and tests.
"""
from __future__ import annotations

from .protocol import IncorrectPhoneNumberError

PHONE_CREDENTIAL_TYPES = frozenset({"phone", "msisdn"})

MIN_DIGITS = 7
MAX_DIGITS = 15  # E.164


class DigitsPhoneNumberUtilities:
    """
    Digits-only phone normalization.

    Strips everything but digits and returns "+<digits>".

    Example:
        utils = DigitsPhoneNumberUtilities()
        utils.normalize("+1 (555) 000-1111")  # "+15550001111"
    """

    def __init__(self, credential_types: frozenset[str] = PHONE_CREDENTIAL_TYPES):
        self._credential_types = frozenset(t.lower() for t in credential_types)

    def is_phone_credential_type(self, credential_type: str) -> bool:
        return (credential_type or "").strip().lower() in self._credential_types

    def normalize(self, phone_number: str) -> str:
        digits = "".join(c for c in phone_number if c.isdigit())
        if not MIN_DIGITS <= len(digits) <= MAX_DIGITS:
            raise IncorrectPhoneNumberError(
                f"'{phone_number}' is not a valid phone number"
            )
        return f"+{digits}"
