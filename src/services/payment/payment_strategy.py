import random
import string
from abc import ABC, abstractmethod
from typing import Optional


class PaymentStrategy(ABC):
    """Интерфейс стратегии оплаты."""

    currency: str = "JPY"

    @abstractmethod
    def pay(self, amount: int) -> None:
        pass


class CreditCardPayment(PaymentStrategy):
    def __init__(self, name: str, card_number: str):
        self.name = name
        self.card_number = card_number

    @property
    def masked_card_number(self) -> str:
        return f"****-****-****-{self.card_number[-4:]}"

    def pay(self, amount: int) -> None:
        print(f"Paid {amount} {self.currency} with Credit Card.")
        print(f"Card Holder: {self.name}, Card Number: {self.masked_card_number}")


class PayPalPayment(PaymentStrategy):
    def __init__(self, email: str):
        self.email = email

    def pay(self, amount: int) -> None:
        print(f"Paid {amount} {self.currency} with PayPal.")
        print(f"PayPal Account: {self.email}")


class ConvenienceStorePayment(PaymentStrategy):
    """Pay at a store counter using a generated transaction id."""

    TRANSACTION_ID_LENGTH = 10

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self.last_transaction_id = ""

    def _new_transaction_id(self) -> str:
        alphabet = string.ascii_uppercase + string.digits
        return "".join(self._rng.choice(alphabet) for _ in range(self.TRANSACTION_ID_LENGTH))

    def pay(self, amount: int) -> None:
        self.last_transaction_id = self._new_transaction_id()
        print(f"Paid {amount} {self.currency} at a convenience store.")
        print(f"Transaction ID: {self.last_transaction_id}. Please pay at a nearby store.")


class ShoppingCart:
    """Context: delegates checkout to whichever strategy is set."""

    def __init__(self, strategy: PaymentStrategy, currency: str = "JPY"):
        self.currency = currency
        self.set_payment_strategy(strategy)

    @property
    def payment_strategy(self) -> PaymentStrategy:
        return self._payment_strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        """Сменить стратегию оплаты во время выполнения."""
        strategy.currency = self.currency
        self._payment_strategy = strategy

    def checkout(self, amount: int) -> None:
        print(f"--- Checking out with total amount: {amount} {self.currency} ---")
        self._payment_strategy.pay(amount)
