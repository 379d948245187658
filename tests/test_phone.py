"""
Tests for the reference phone number utility.
"""

import pytest

from smsproxy.transport import DigitsPhoneNumberUtilities, IncorrectPhoneNumberError, PhoneNumberUtilities


@pytest.fixture
def utils():
    return DigitsPhoneNumberUtilities()


class TestCredentialType:
    @pytest.mark.parametrize("credential_type", ["phone", "PHONE", " msisdn "])
    def test_phone_types(self, utils, credential_type):
        assert utils.is_phone_credential_type(credential_type) is True

    @pytest.mark.parametrize("credential_type", ["email", "", None])
    def test_other_types(self, utils, credential_type):
        assert utils.is_phone_credential_type(credential_type) is False

    def test_custom_types(self):
        utils = DigitsPhoneNumberUtilities(credential_types=frozenset({"Mobile"}))

        assert utils.is_phone_credential_type("mobile") is True
        assert utils.is_phone_credential_type("phone") is False


class TestNormalize:
    def test_strips_formatting(self, utils):
        assert utils.normalize("+1 (555) 000-1111") == "+15550001111"

    @pytest.mark.parametrize("value", ["12345", "+1 234 567 890 123 456", "call me"])
    def test_rejects_bad_numbers(self, utils, value):
        with pytest.raises(IncorrectPhoneNumberError):
            utils.normalize(value)

    def test_satisfies_protocol(self, utils):
        assert isinstance(utils, PhoneNumberUtilities)
