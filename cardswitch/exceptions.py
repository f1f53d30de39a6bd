"""
Error hierarchy for the switch.

SwitchError subclasses are outcomes the caller sees: each one carries the ISO
response code and message it is answered with. LedgerError subclasses are
internal ledger signals and are always translated by the processor before a
response is built.
"""
from typing import Dict, Any


class SwitchError(Exception):
    """Base exception for request-level failures answered with a response code."""

    def __init__(self, response_code: str, message: str):
        self.response_code = response_code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "response_code": self.response_code,
            "message": self.message,
        }


class InvalidMessageType(SwitchError):
    """The MTI is unknown or does not belong to the endpoint it was sent to."""

    def __init__(self, context: str = "Request"):
        self.context = context
        super().__init__("03", f"Invalid MTI for {context}")


class InvalidField(SwitchError):
    """A mandatory field is missing or empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__("30", f"Missing required field: {field}")


class DuplicateTransaction(SwitchError):
    """An authorization reused the STAN of an already approved transaction."""

    def __init__(self, stan: str):
        self.stan = stan
        super().__init__("94", "Duplicate transaction")


class LedgerError(Exception):
    """Base for internal ledger signals."""

    def __init__(self, stan: str):
        self.stan = stan
        super().__init__(f"{self.__class__.__name__}: {stan}")


class DuplicateKey(LedgerError):
    pass


class NotFound(LedgerError):
    pass


class AlreadyReversed(LedgerError):
    pass
