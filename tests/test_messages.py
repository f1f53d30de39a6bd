import pytest

from cardswitch.exceptions import InvalidMessageType
from cardswitch.messages import MessageType, RESPONSE_TYPES, mask_pan


class TestMessageType:
    @pytest.mark.parametrize("raw,expected", [
        ("0100", MessageType.AUTHORIZATION_REQUEST),
        ("0110", MessageType.AUTHORIZATION_RESPONSE),
        (" 0400", MessageType.REVERSAL_REQUEST),
        ("0410\n", MessageType.REVERSAL_RESPONSE),
    ])
    def test_parse_known(self, raw, expected):
        assert MessageType.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["", "100", "0200", "01000", None])
    def test_parse_unknown_raises(self, raw):
        with pytest.raises(InvalidMessageType) as exc:
            MessageType.parse(raw, "Authorization Request")
        assert exc.value.message == "Invalid MTI for Authorization Request"

    def test_every_request_has_a_response_type(self):
        assert RESPONSE_TYPES[MessageType.AUTHORIZATION_REQUEST].value == "0110"
        assert RESPONSE_TYPES[MessageType.REVERSAL_REQUEST].value == "0410"


class TestMaskPan:
    def test_sixteen_digits(self):
        assert mask_pan("4123456789012345") == "412345******2345"

    def test_short_values_fully_masked(self):
        assert mask_pan("4111") == "****"

    def test_empty(self):
        assert mask_pan("") == ""
