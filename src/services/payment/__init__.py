"""Payment - паттерн Strategy."""

from .payment_strategy import (
    ConvenienceStorePayment,
    CreditCardPayment,
    PaymentStrategy,
    PayPalPayment,
    ShoppingCart,
)

__all__ = [
    'PaymentStrategy',
    'CreditCardPayment',
    'PayPalPayment',
    'ConvenienceStorePayment',
    'ShoppingCart'
]
