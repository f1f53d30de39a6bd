from pydantic import BaseModel
from typing import Optional


class AuthorizationResponse(BaseModel):
    mti: str = "0110"
    response_code: str
    stan: str
    message: str


class ReversalResponse(BaseModel):
    mti: str = "0410"
    response_code: str
    original_stan: str
    message: str
    pan: Optional[str] = None  # stored values, only set on a successful reversal
    amount: Optional[int] = None


class HealthResponse(BaseModel):
    status: str
    service: str
