from fastapi import APIRouter, Depends, Request

from cardswitch.exceptions import SwitchError
from cardswitch.messages import MessageType
from cardswitch.schemas.requests import AuthorizationRequest, ReversalRequest
from cardswitch.schemas.responses import AuthorizationResponse, ReversalResponse
from cardswitch.services.processor import TransactionProcessor

router = APIRouter()


def get_processor(request: Request) -> TransactionProcessor:
    """Processor built at startup; overridden in tests."""
    return request.app.state.processor


@router.post("/authorize", response_model=AuthorizationResponse)
def authorize(
    request: AuthorizationRequest,
    processor: TransactionProcessor = Depends(get_processor),
):
    """
    Authorization request (MTI 0100).

    - 00 when the PAN starts with 4, 05 otherwise
    - Approved transactions are kept for later reversal
    - Invalid MTI, missing STAN or a reused STAN are answered in the same
      0110 shape with their own response code
    """
    try:
        return processor.authorize(request)
    except SwitchError as e:
        return AuthorizationResponse(
            mti=MessageType.AUTHORIZATION_RESPONSE.value,
            response_code=e.response_code,
            stan=request.stan,
            message=e.message,
        )


@router.post("/reversal", response_model=ReversalResponse)
def reversal(
    request: ReversalRequest,
    processor: TransactionProcessor = Depends(get_processor),
):
    """
    Reversal request (MTI 0400).

    - 00 when the original authorization exists and was not reversed yet
    - 94 when it is unknown or already reversed
    """
    try:
        return processor.reverse(request)
    except SwitchError as e:
        return ReversalResponse(
            mti=MessageType.REVERSAL_RESPONSE.value,
            response_code=e.response_code,
            original_stan=request.original_stan,
            message=e.message,
        )
