"""Transaction-related domain exceptions."""

from .base import DomainException


class PendingTransactionNotFoundException(DomainException):
    """Raised when a pending transaction cannot be found (or was already resolved)."""

    code = "PENDING_TRANSACTION_NOT_FOUND"

    def __init__(self, transaction_id: str):
        super().__init__(
            message=f"Pending transaction not found: {transaction_id}",
            details={"transaction_id": transaction_id},
        )
        self.transaction_id = transaction_id


class AccountNotFoundException(DomainException):
    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, account_id: str):
        super().__init__(
            message=f"Account not found: {account_id}",
            details={"account_id": account_id},
        )
        self.account_id = account_id
