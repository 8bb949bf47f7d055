"""Catalog item models"""

from datetime import date, datetime, time, timezone
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default evaluation clock"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ShippingUnit(BaseModel):
    """One physical unit of a shippable item"""
    name: str
    weight: float = Field(gt=0)


class Item(BaseModel):
    """
    Product in the catalog.

    Capabilities are independent optional fields: an item with an
    ``expiry`` is perishable, an item with a ``weight`` (kg per unit) is
    shippable. Any combination of the two is valid.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    expiry: Optional[datetime] = None
    weight: Optional[float] = Field(default=None, gt=0)

    @field_validator("expiry", mode="before")
    @classmethod
    def _date_to_datetime(cls, value):
        # A bare date expires at midnight UTC of that day
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        return value

    @field_validator("expiry")
    @classmethod
    def _expiry_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    @property
    def available_quantity(self) -> int:
        return self.quantity

    @property
    def is_perishable(self) -> bool:
        return self.expiry is not None

    @property
    def is_shippable(self) -> bool:
        return self.weight is not None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check expiry against an evaluation time.

        Args:
            now: Evaluation instant, defaults to the current UTC time

        Returns:
            False for items without an expiry, otherwise whether the
            expiry instant lies before ``now``
        """
        if self.expiry is None:
            return False
        if now is None:
            now = utc_now()
        return self.expiry < as_utc(now)

    def reduce_quantity(self, amount: int) -> None:
        """Decrement stock; callers must not take more than is available"""
        self.quantity = self.quantity - amount

    def shipping_unit(self) -> ShippingUnit:
        if self.weight is None:
            raise ValueError(f"{self.name} is not shippable")
        return ShippingUnit(name=self.name, weight=self.weight)
