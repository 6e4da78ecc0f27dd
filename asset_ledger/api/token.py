"""
Token endpoints
"""

from fastapi import APIRouter, Depends

from .auth import get_asset_ledger, get_caller, to_http_error
from .schemas import (
    AmountRequest, AmountResponse, ApproveRequest, MintRequest,
    OperationResponse, TransferFromRequest, TransferRequest
)
from ..errors import LedgerError
from ..facade import AssetLedger


router = APIRouter()


@router.post("/transfer", response_model=OperationResponse)
async def transfer(
    request: TransferRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Transfer tokens from the caller"""
    try:
        ledger.transfer(caller, request.to, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Transfer completed")


@router.post("/approve", response_model=OperationResponse)
async def approve(
    request: ApproveRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Set the caller's allowance for a spender"""
    try:
        ledger.approve(caller, request.spender, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Allowance set")


@router.post("/transfer-from", response_model=OperationResponse)
async def transfer_from(
    request: TransferFromRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Spend an allowance granted to the caller"""
    try:
        ledger.transfer_from(caller, request.from_account, request.to, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Delegated transfer completed")


@router.post("/mint", response_model=OperationResponse)
async def mint(
    request: MintRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Mint new tokens (owner only)"""
    try:
        ledger.mint(caller, request.to, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Tokens minted")


@router.post("/burn", response_model=OperationResponse)
async def burn(
    request: AmountRequest,
    caller: str = Depends(get_caller),
    ledger: AssetLedger = Depends(get_asset_ledger)
):
    """Burn tokens from the caller's own balance"""
    try:
        ledger.burn(caller, request.to_int())
    except LedgerError as e:
        raise to_http_error(e)
    return OperationResponse(message="Tokens burned")


@router.get("/balance/{account}", response_model=AmountResponse)
async def get_balance(account: str, ledger: AssetLedger = Depends(get_asset_ledger)):
    return AmountResponse.from_int(ledger.balance_of(account))


@router.get("/allowance/{owner}/{spender}", response_model=AmountResponse)
async def get_allowance(owner: str, spender: str, ledger: AssetLedger = Depends(get_asset_ledger)):
    return AmountResponse.from_int(ledger.allowance(owner, spender))


@router.get("/supply")
async def get_supply(ledger: AssetLedger = Depends(get_asset_ledger)):
    """Total supply and token precision"""
    return {
        "total_supply": str(ledger.total_supply()),
        "decimals": ledger.decimals()
    }
