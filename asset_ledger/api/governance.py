"""
Governance endpoints (admin set, emergency withdrawal)
"""

from fastapi import APIRouter, Depends

from .auth import get_asset_ledger, get_caller, to_http_error
from .schemas import AmountRequest, OperationResponse
from ..errors import LedgerError
from ..facade import AssetLedger


router = APIRouter()


@router.post("/admins/{account}", response_model=OperationResponse)
async def grant_admin(
    account: str,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Grant admin rights (owner only)"""
    try:
        ledger.grant_admin(caller, account)
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message=f"{account} granted admin")


@router.delete("/admins/{account}", response_model=OperationResponse)
async def revoke_admin(
    account: str,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Revoke admin rights (owner only)"""
    try:
        ledger.revoke_admin(caller, account)
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message=f"{account} admin revoked")


@router.get("/admins/{account}")
async def check_admin(account: str, ledger: AssetLedger = Depends(get_asset_ledger)):
    return {"account": account, "is_admin": ledger.is_admin(account)}


@router.post("/emergency-withdraw", response_model=OperationResponse)
async def emergency_withdraw(
    request: AmountRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Drain the ledger's custody account to the owner (owner only)"""
    try:
        ledger.emergency_withdraw(caller, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Emergency withdrawal completed")


@router.get("/integrity")
async def verify_integrity(ledger: AssetLedger = Depends(get_asset_ledger)):
    """Conservation invariant check for both sub-ledgers"""
    result = ledger.verify_integrity()
    return {k: (str(v) if isinstance(v, int) and not isinstance(v, bool) else v)
            for k, v in result.items()}
