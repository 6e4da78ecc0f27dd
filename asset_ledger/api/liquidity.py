"""
Liquidity endpoints
"""

from fastapi import APIRouter, Depends

from .auth import get_asset_ledger, get_caller, to_http_error
from .schemas import AmountRequest, AmountResponse, OperationResponse
from ..errors import LedgerError
from ..facade import AssetLedger


router = APIRouter()


@router.post("/add", response_model=OperationResponse)
async def add_liquidity(
    request: AmountRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    try:
        ledger.add_liquidity(caller, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Liquidity added")


@router.post("/remove", response_model=OperationResponse)
async def remove_liquidity(
    request: AmountRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    try:
        ledger.remove_liquidity(caller, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Liquidity removed")


@router.get("/{account}", response_model=AmountResponse)
async def get_liquidity(account: str, ledger: AssetLedger = Depends(get_asset_ledger)):
    """Stake recorded for an account"""
    return AmountResponse.from_int(ledger.liquidity_of(account))
