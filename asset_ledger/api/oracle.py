"""
Price oracle endpoints
"""

from fastapi import APIRouter, Depends

from .auth import get_asset_ledger, get_caller, to_http_error
from .schemas import OperationResponse, PriceRequest
from ..errors import LedgerError
from ..facade import AssetLedger


router = APIRouter()


@router.post("/price", response_model=OperationResponse)
async def update_price(
    request: PriceRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Report a new price (designated reporter only)"""
    try:
        ledger.update_price(caller, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Price updated")


@router.get("/price")
async def get_price(ledger: AssetLedger = Depends(get_asset_ledger)):
    return {"price": str(ledger.get_price())}
