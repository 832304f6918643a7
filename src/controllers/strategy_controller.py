from services.payment import ConvenienceStorePayment, CreditCardPayment, PayPalPayment, ShoppingCart

from .demo_controller import DemoController


class StrategyController(DemoController):
    title = "Strategy"

    def run(self) -> None:
        self.print_header()
        currency = self.settings.currency

        cart1 = ShoppingCart(CreditCardPayment("Taro Yamada", "1234567890123456"), currency)
        cart1.checkout(15000)

        self.print_separator()

        cart2 = ShoppingCart(PayPalPayment("hanako@example.com"), currency)
        cart2.checkout(8800)

        self.print_separator()

        print("Switching payment strategy to Convenience Store Payment...")
        cart2.set_payment_strategy(ConvenienceStorePayment())
        cart2.checkout(3000)
