"""
Transaction processor.

Implements the two flows of the switch against an injected ledger:

  authorize: 0100 -> 0110
    1. MTI must be 0100, STAN must be present
    2. Approve iff the PAN starts with "4", decline otherwise
    3. Store approved authorizations under their STAN

  reverse: 0400 -> 0410
    1. MTI must be 0400
    2. Flip the reversed flag of the original STAN in one ledger call
    3. Answer 00 on success, 94 when the original is unknown or already reversed

Validation failures are raised as SwitchError subclasses; the transport turns
them into declined-shaped responses.
"""
import logging
from datetime import datetime, timezone

from cardswitch.exceptions import (
    AlreadyReversed,
    DuplicateKey,
    DuplicateTransaction,
    InvalidField,
    InvalidMessageType,
    NotFound,
)
from cardswitch.ledger.base import BaseLedger
from cardswitch.messages import RESPONSE_TYPES, MessageType, ResponseCode, mask_pan
from cardswitch.schemas.records import TransactionRecord
from cardswitch.schemas.requests import AuthorizationRequest, ReversalRequest
from cardswitch.schemas.responses import AuthorizationResponse, ReversalResponse

logger = logging.getLogger(__name__)

AUTHORIZATION_CONTEXT = "Authorization Request"
REVERSAL_CONTEXT = "Reversal Request"

AUTHORIZATION_MESSAGES = {
    ResponseCode.APPROVED: "Transaction Approved",
    ResponseCode.DECLINED: "Transaction Declined",
}

REVERSAL_APPROVED = "Reversal Successful"
REVERSAL_NOT_FOUND = "Original transaction not found"
REVERSAL_DUPLICATE = "Duplicate reversal"


def is_approved(pan: str) -> bool:
    """The whole approval policy: Visa-range PANs (leading '4') are approved."""
    return bool(pan) and pan[0] == "4"


def _expect(raw_mti: str, expected: MessageType, context: str) -> MessageType:
    """Check the request MTI and return the MTI to answer with."""
    if MessageType.parse(raw_mti, context) is not expected:
        raise InvalidMessageType(context)
    return RESPONSE_TYPES[expected]


class TransactionProcessor:
    def __init__(self, ledger: BaseLedger):
        self.ledger = ledger

    def authorize(self, request: AuthorizationRequest) -> AuthorizationResponse:
        """
        Process an authorization request.

        Raises:
            InvalidMessageType: if the MTI is not 0100
            InvalidField: if the STAN is empty
            DuplicateTransaction: if an approved authorization already used the STAN
        """
        response_type = _expect(
            request.mti, MessageType.AUTHORIZATION_REQUEST, AUTHORIZATION_CONTEXT
        )

        stan = request.stan.strip()
        if not stan:
            raise InvalidField("stan")

        if is_approved(request.pan):
            code = ResponseCode.APPROVED
            record = TransactionRecord(
                stan=stan,
                pan=request.pan,
                amount=request.amount,
                currency=request.currency,
                merchant_id=request.merchant_id,
                transaction_datetime=request.transaction_datetime,
                created_at=datetime.now(timezone.utc),
            )
            try:
                self.ledger.put(record)
            except DuplicateKey:
                logger.warning("Authorization rejected, STAN %s already used", stan)
                raise DuplicateTransaction(stan)
        else:
            code = ResponseCode.DECLINED

        logger.info(
            "Authorization stan=%s pan=%s amount=%s %s -> %s",
            stan, mask_pan(request.pan), request.amount, request.currency, code.value,
        )
        return AuthorizationResponse(
            mti=response_type.value,
            response_code=code.value,
            stan=stan,
            message=AUTHORIZATION_MESSAGES[code],
        )

    def reverse(self, request: ReversalRequest) -> ReversalResponse:
        """
        Process a reversal request against the ledger.

        The stored record is authoritative: on success the stored PAN and amount
        are echoed, and a mismatch with the request's copy is only logged.

        Raises:
            InvalidMessageType: if the MTI is not 0400
        """
        _expect(request.mti, MessageType.REVERSAL_REQUEST, REVERSAL_CONTEXT)

        original_stan = request.original_stan.strip()
        try:
            record = self.ledger.mark_reversed(original_stan)
        except NotFound:
            logger.info("Reversal stan=%s -> 94 (original not found)", original_stan)
            return self._reversal_response(
                original_stan, ResponseCode.NOT_FOUND_OR_DUPLICATE,
                REVERSAL_NOT_FOUND,
            )
        except AlreadyReversed:
            logger.info("Reversal stan=%s -> 94 (duplicate)", original_stan)
            return self._reversal_response(
                original_stan, ResponseCode.NOT_FOUND_OR_DUPLICATE,
                REVERSAL_DUPLICATE,
            )

        if request.pan != record.pan or request.amount != record.amount:
            logger.warning(
                "Reversal stan=%s disagrees with stored authorization "
                "(pan %s vs %s, amount %s vs %s); using stored values",
                original_stan,
                mask_pan(request.pan), mask_pan(record.pan),
                request.amount, record.amount,
            )

        logger.info("Reversal stan=%s pan=%s amount=%s -> 00",
                    original_stan, mask_pan(record.pan), record.amount)
        return self._reversal_response(
            original_stan, ResponseCode.APPROVED,
            REVERSAL_APPROVED,
            pan=record.pan, amount=record.amount,
        )

    @staticmethod
    def _reversal_response(original_stan, code, message, pan=None, amount=None):
        return ReversalResponse(
            mti=MessageType.REVERSAL_RESPONSE.value,
            response_code=code.value,
            original_stan=original_stan,
            message=message,
            pan=pan,
            amount=amount,
        )
