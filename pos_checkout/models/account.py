"""Customer account model"""

from pydantic import BaseModel, ConfigDict, Field


class CustomerAccount(BaseModel):
    """Customer paying from a stored balance"""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(min_length=1)
    balance: float = Field(ge=0)

    def can_afford(self, amount: float) -> bool:
        return self.balance >= amount

    def debit(self, amount: float) -> None:
        """Deduct an amount that was already checked with can_afford"""
        self.balance = self.balance - amount
