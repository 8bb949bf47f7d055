"""In-memory customer accounts"""

from typing import Optional

from ..core.config import get_settings
from ..models.account import CustomerAccount


def demo_accounts() -> list[CustomerAccount]:
    return [CustomerAccount(name="Ali", balance=1000)]


class AccountDatabase:
    """In-memory customer account storage"""

    def __init__(self, accounts: Optional[list[CustomerAccount]] = None):
        if accounts is None:
            accounts = demo_accounts() if get_settings().seed_demo_data else []
        self.accounts: dict[str, CustomerAccount] = {a.name: a for a in accounts}

    def get_account(self, name: str) -> Optional[CustomerAccount]:
        """Get an account by customer name"""
        return self.accounts.get(name)

    def add_account(self, account: CustomerAccount) -> CustomerAccount:
        if account.name in self.accounts:
            raise ValueError(f"Account already exists: {account.name}")
        self.accounts[account.name] = account
        return account

    def reset(self, accounts: Optional[list[CustomerAccount]] = None) -> None:
        accounts = accounts if accounts is not None else demo_accounts()
        self.accounts = {a.name: a for a in accounts}


# Singleton instance
account_db = AccountDatabase()
