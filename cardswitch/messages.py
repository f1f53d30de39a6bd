"""
ISO 8583 message vocabulary used by the switch.

Only the four message types the switch speaks and the response codes it
answers with are modelled; there is no bitmap or field-level encoding.
"""
from enum import Enum

from cardswitch.exceptions import InvalidMessageType


class MessageType(str, Enum):
    AUTHORIZATION_REQUEST = "0100"
    AUTHORIZATION_RESPONSE = "0110"
    REVERSAL_REQUEST = "0400"
    REVERSAL_RESPONSE = "0410"

    @classmethod
    def parse(cls, raw, context: str = "Request") -> "MessageType":
        """
        Normalize a wire MTI into a MessageType.

        Raises:
            InvalidMessageType: if the value is not one of the known MTIs
        """
        value = raw.strip() if isinstance(raw, str) else raw
        try:
            return cls(value)
        except ValueError:
            raise InvalidMessageType(context)


class ResponseCode(str, Enum):
    APPROVED = "00"
    INVALID_MESSAGE = "03"
    DECLINED = "05"
    FORMAT_ERROR = "30"
    NOT_FOUND_OR_DUPLICATE = "94"


# Response MTI for every request MTI the switch accepts
RESPONSE_TYPES = {
    MessageType.AUTHORIZATION_REQUEST: MessageType.AUTHORIZATION_RESPONSE,
    MessageType.REVERSAL_REQUEST: MessageType.REVERSAL_RESPONSE,
}


def mask_pan(pan: str) -> str:
    """Keep the BIN and the last four digits, e.g. 412345******2345."""
    if not pan:
        return ""
    if len(pan) <= 10:
        return "*" * len(pan)
    return f"{pan[:6]}{'*' * (len(pan) - 10)}{pan[-4:]}"
