from pydantic import BaseModel


class AuthorizationRequest(BaseModel):
    """Parsed 0100 message. Only the MTI and STAN are validated by the switch."""

    mti: str
    pan: str = ""
    amount: int = 0  # minor currency units
    currency: str = ""
    stan: str = ""
    transaction_datetime: str = ""  # MMDDhhmmss, echoed
    merchant_id: str = ""


class ReversalRequest(BaseModel):
    """Parsed 0400 message referencing a previously approved authorization."""

    mti: str
    original_stan: str = ""
    pan: str = ""
    amount: int = 0
