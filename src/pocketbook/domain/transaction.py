"""Combined income/expense transaction feed."""

from typing import Optional

from pocketbook.database.base import Database
from pocketbook.domain.auth import AuthContext
from pocketbook.domain.entities import Transaction, TransactionType
from pocketbook.domain.errors import ValidationError

RECENT_TRANSACTION_COUNT = 6


class TransactionService:
    """Service for the merged view of income entries and expenses."""

    def __init__(self, db: Database, auth: AuthContext):
        self.db = db
        self.auth = auth

    def list_transactions(
        self,
        limit: Optional[int] = None,
        transaction_type: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Transaction]:
        """List income and expenses together, newest first.

        Args:
            limit: Optional maximum number of transactions to return
            transaction_type: Only return ``income`` or ``expense`` entries;
                ``None`` or ``all`` returns both
            search: Only return transactions whose description contains this
                text, ignoring case; blank searches are ignored

        Returns:
            List of transaction entities sorted by date, then creation time

        Raises:
            ValidationError: If the transaction type is not recognized
        """
        wanted_type = self._parse_type(transaction_type)
        user_id = self.auth.user_id
        transactions = [
            Transaction(
                id=income.id,
                type=TransactionType.INCOME,
                amount=income.amount,
                description=income.source,
                date=income.date,
                created_at=income.created_at,
            )
            for income in self.db.list_incomes(user_id)
        ]
        transactions.extend(
            Transaction(
                id=expense.id,
                type=TransactionType.EXPENSE,
                amount=expense.amount,
                description=expense.description,
                date=expense.date,
                created_at=expense.created_at,
            )
            for expense in self.db.list_expenses(user_id)
        )

        transactions.sort(key=lambda txn: (txn.date, txn.created_at), reverse=True)
        if wanted_type is not None:
            transactions = [txn for txn in transactions if txn.type == wanted_type]
        if search and search.strip():
            term = search.strip().lower()
            transactions = [txn for txn in transactions if term in txn.description.lower()]

        if limit is not None:
            return transactions[: max(limit, 0)]
        return transactions

    def recent_transactions(self) -> list[Transaction]:
        """The few most recent transactions shown on the dashboard."""
        return self.list_transactions(limit=RECENT_TRANSACTION_COUNT)

    @staticmethod
    def _parse_type(transaction_type: Optional[str]) -> Optional[TransactionType]:
        if transaction_type is None or transaction_type == "all":
            return None
        try:
            return TransactionType(transaction_type)
        except ValueError:
            raise ValidationError(
                f"Invalid transaction type '{transaction_type}'. Use 'all', 'income' or 'expense'"
            ) from None
