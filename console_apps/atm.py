import logging
from console_apps.models import BankAccount
from console_apps.schemas import AmountRequest, OpeningBalanceRequest
from console_apps.utils import Console, ask_until_valid

logger = logging.getLogger(__name__)

MENU_LINES = [
    "Menu:",
    "  1. Check Balance",
    "  2. Deposit",
    "  3. Withdraw",
    "  4. Mini-statement (summary)",
    "  5. Exit",
]

AMOUNT_HINT = "Invalid input. Please enter a numeric amount (e.g., 1000 or 250.50)."


def open_account(console: Console) -> BankAccount:
    """Asks for the demo account details at the start of a session."""
    console.say("Create a demo account (for this session).")
    holder = console.ask("Enter account holder name: ")
    number = console.ask("Enter account number: ")
    balance = ask_until_valid(
        console,
        "Enter initial balance (or 0): ",
        lambda raw_line: OpeningBalanceRequest(amount=raw_line).amount,
        "Invalid input. Please enter a numeric amount.",
    )
    return BankAccount(holder, number, balance)


class AtmMenu:
    def __init__(self, console: Console, account: BankAccount):
        self.console = console
        self.account = account
        self.handlers = {
            '1': self.handle_check_balance,
            '2': self.handle_deposit,
            '3': self.handle_withdraw,
            '4': self.handle_mini_statement,
        }

    def run(self) -> None:
        self.console.say("===================================")
        self.console.say("   Welcome to Simple Python ATM")
        self.console.say("===================================")

        while True:
            for line in MENU_LINES:
                self.console.say(line)
            choice = self.console.ask("Choose an option: ")

            if choice == '5':
                self.console.say("Thank you for using Simple Python ATM. Goodbye!")
                break

            handler = self.handlers.get(choice)
            if handler:
                handler()
            else:
                self.console.say("Invalid option. Please choose between 1 and 5.")
            self.console.say()

    def ask_amount(self, prompt: str):
        return ask_until_valid(
            self.console, prompt, lambda raw_line: AmountRequest(amount=raw_line).amount, AMOUNT_HINT
        )

    def handle_check_balance(self):
        self.console.say(f"Account: {self.account.holder} ({self.account.number})")
        self.console.say(f"Current Balance: {self.account.balance:.2f}")

    def handle_deposit(self):
        result = self.account.deposit(self.ask_amount("Enter amount to deposit: "))
        self.console.say(result.message)
        if result.success:
            self.console.say(f"New Balance: {result.balance:.2f}")

    def handle_withdraw(self):
        result = self.account.withdraw(self.ask_amount("Enter amount to withdraw: "))
        self.console.say(result.message)
        if result.success:
            self.console.say(f"Remaining Balance: {result.balance:.2f}")
        else:
            logger.info(f"Withdrawal refused for {self.account.number}: {result.message}")
            self.console.say(f"Available Balance: {result.balance:.2f}")

    def handle_mini_statement(self):
        self.console.say("Mini-statement (summary):")
        self.console.say(f"Account Holder : {self.account.holder}")
        self.console.say(f"Account Number : {self.account.number}")
        self.console.say(f"Available Bal. : {self.account.balance:.2f}")

        recent = self.account.recent_transactions()
        if not recent:
            self.console.say("No transactions this session.")
            return
        self.console.say("Recent transactions:")
        for transaction in recent:
            self.console.say(
                f"  {transaction.kind:<10} {transaction.amount:>10.2f}  balance {transaction.balance_after:.2f}"
            )
