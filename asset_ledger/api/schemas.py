"""
Pydantic schemas for API requests and responses
"""

from pydantic import BaseModel, Field

from ..amounts import parse_amount


class AmountRequest(BaseModel):
    amount: str = Field(..., description="Base-unit amount as a decimal integer string")

    def to_int(self) -> int:
        return parse_amount(self.amount)


class TransferRequest(AmountRequest):
    to: str


class ApproveRequest(AmountRequest):
    spender: str


class TransferFromRequest(AmountRequest):
    from_account: str = Field(..., alias="from")
    to: str


class MintRequest(AmountRequest):
    to: str


class PriceRequest(BaseModel):
    price: str = Field(..., description="Price as a decimal integer string")

    def to_int(self) -> int:
        return parse_amount(self.price)


class AmountResponse(BaseModel):
    amount: str

    @classmethod
    def from_int(cls, value: int) -> 'AmountResponse':
        return cls(amount=str(value))


class OperationResponse(BaseModel):
    success: bool = True
    message: str
