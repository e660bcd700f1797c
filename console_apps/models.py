from decimal import Decimal
from console_apps.config import AtmConfig
from console_apps.schemas import Transaction, TransactionResult

class BankAccount:
    # Single owner, single thread: the balance is only ever changed
    # through deposit() and withdraw(), which either apply fully or not at all.
    def __init__(self, holder="", number="", balance=Decimal("0")):
        self.holder = holder.strip() or AtmConfig.DEFAULT_HOLDER
        self.number = number.strip() or AtmConfig.DEFAULT_ACCOUNT_NUMBER
        self.balance = max(Decimal("0"), Decimal(balance))
        self.transactions: list[Transaction] = []

    def deposit(self, amount: Decimal) -> TransactionResult:
        if amount <= 0:
            return self._reject("Deposit failed: amount must be positive.")
        self.balance += amount
        self._record("deposit", amount)
        return TransactionResult(success=True, message=f"Deposit successful: {amount:.2f} added.", balance=self.balance)

    def withdraw(self, amount: Decimal) -> TransactionResult:
        if amount <= 0:
            return self._reject("Withdrawal failed: amount must be positive.")
        if amount > self.balance:
            return self._reject("Withdrawal failed: insufficient balance.")
        self.balance -= amount
        self._record("withdrawal", amount)
        return TransactionResult(success=True, message=f"Please collect your cash: {amount:.2f}", balance=self.balance)

    def recent_transactions(self, limit=AtmConfig.STATEMENT_LENGTH) -> list[Transaction]:
        return self.transactions[-limit:]

    def _record(self, kind, amount):
        self.transactions.append(Transaction(kind=kind, amount=amount, balance_after=self.balance))

    def _reject(self, message):
        return TransactionResult(success=False, message=message, balance=self.balance)
