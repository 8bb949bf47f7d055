"""Checkout models"""

from typing import Optional

from pydantic import BaseModel

from ..errors import CheckoutOutcome


class ShippingNoticeLine(BaseModel):
    """Ordered count of one distinct shippable item"""
    item_name: str
    count: int


class ShippingNotice(BaseModel):
    """Manifest of the shippable units in an order"""
    lines: list[ShippingNoticeLine]
    unit_weights: list[float]  # kg, one per physical unit
    total_weight: float  # kg


class ReceiptLine(BaseModel):
    """Receipt line for one cart entry"""
    quantity: int
    item_name: str
    line_total: float


class Receipt(BaseModel):
    """Settled amounts of a completed checkout, at full precision"""
    lines: list[ReceiptLine]
    subtotal: float
    shipping: float
    total: float
    balance: float


class CheckoutRequest(BaseModel):
    """Request to checkout a cart on behalf of a customer"""
    cart_id: str
    customer: str


class CheckoutReport(BaseModel):
    """Result of a checkout attempt"""
    success: bool
    outcome: CheckoutOutcome
    item_name: Optional[str] = None
    error_message: Optional[str] = None
    receipt: Optional[Receipt] = None
    shipping_notice: Optional[ShippingNotice] = None
    receipt_text: Optional[str] = None
    shipping_notice_text: Optional[str] = None

    def render(self) -> str:
        """Console output: shipment notice before receipt, or the error"""
        if not self.success:
            return f"Error: {self.error_message}"
        parts = [self.shipping_notice_text, self.receipt_text]
        return "\n".join(part for part in parts if part)
