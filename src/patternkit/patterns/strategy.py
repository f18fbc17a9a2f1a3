"""Strategy pattern.

A ``ShoppingCart`` delegates payment to whichever ``PaymentStrategy`` it was
given; the algorithm can be swapped at runtime.
"""

import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from patternkit.exceptions import StrategyNotRegisteredError
from patternkit.logging.logger import get_logger

logger = get_logger(__name__)


class PaymentStrategy(ABC):
    """Interchangeable payment algorithm."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """
        Pay the given amount.

        Args:
            amount: Amount to charge

        Returns:
            The confirmation line that was printed
        """


class CreditCardPayment(PaymentStrategy):

    def __init__(self, card_number: str):
        self.card_number = card_number

    def pay(self, amount: float) -> str:
        message = f"Paid {amount:.2f} using Credit Card ending in {self.card_number[-4:]}"
        print(message)
        return message


class PayPalPayment(PaymentStrategy):

    def __init__(self, email: str):
        self.email = email

    def pay(self, amount: float) -> str:
        message = f"Paid {amount:.2f} using PayPal account {self.email}"
        print(message)
        return message


class CashPayment(PaymentStrategy):

    def pay(self, amount: float) -> str:
        message = f"Paid {amount:.2f} in cash"
        print(message)
        return message


class ShoppingCart:
    """Context that uses a payment strategy."""

    def __init__(self, payment_strategy: Optional[PaymentStrategy] = None):
        self.payment_strategy = payment_strategy

    def set_payment_strategy(self, payment_strategy: PaymentStrategy) -> None:
        self.payment_strategy = payment_strategy

    def checkout(self, amount: float) -> Optional[str]:
        if self.payment_strategy is None:
            print("No payment strategy selected")
            return None
        return self.payment_strategy.pay(amount)


class PaymentStrategyRegistry:
    """Maps checkout method names to the constructors of their payment strategies.

    Callers pick a payment method by name, e.g. from a form field, and pass
    the method's own details (card number, account email) as keyword
    arguments when the strategy is built.
    """

    def __init__(self):
        self._strategies: Dict[str, Callable[..., PaymentStrategy]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register_strategy(
        self, strategy_name: str, strategy_factory: Callable[..., PaymentStrategy]
    ) -> None:
        """
        Offer a payment method under a name.

        Args:
            strategy_name: Checkout method name, e.g. 'credit_card'
            strategy_factory: PaymentStrategy class or any callable building one
                from the method's details
        """
        with self._lock:
            if strategy_name in self._strategies:
                self.logger.warning(f"Overriding existing payment strategy: {strategy_name}")

            self._strategies[strategy_name] = strategy_factory
            self.logger.info(f"Registered payment strategy: {strategy_name}")

    def get_strategy(self, strategy_name: str, **kwargs) -> PaymentStrategy:
        """
        Build the strategy for a checkout method.

        Args:
            strategy_name: Checkout method name
            **kwargs: Payment details, e.g. card_number=... or email=...

        Returns:
            A strategy ready to hand to ShoppingCart.set_payment_strategy

        Raises:
            StrategyNotRegisteredError: If no method is offered under that name
        """
        with self._lock:
            if strategy_name not in self._strategies:
                available = sorted(self._strategies)
                raise StrategyNotRegisteredError(
                    f"Payment strategy '{strategy_name}' not registered. "
                    f"Available strategies: {available}",
                    details={"available": available},
                )

            strategy_factory = self._strategies[strategy_name]
        return strategy_factory(**kwargs)

    def list_strategies(self) -> List[str]:
        with self._lock:
            return list(self._strategies.keys())

    def is_registered(self, strategy_name: str) -> bool:
        with self._lock:
            return strategy_name in self._strategies


# Shared registry with the built-in payment methods
_payment_registry: Optional[PaymentStrategyRegistry] = None
_registry_lock = threading.Lock()


def get_payment_registry() -> PaymentStrategyRegistry:
    """Return the shared registry, offering credit_card, paypal and cash."""
    global _payment_registry

    if _payment_registry is None:
        with _registry_lock:
            if _payment_registry is None:
                registry = PaymentStrategyRegistry()
                _register_default_strategies(registry)
                _payment_registry = registry

    return _payment_registry


def _register_default_strategies(registry: PaymentStrategyRegistry) -> None:
    registry.register_strategy("credit_card", CreditCardPayment)
    registry.register_strategy("paypal", PayPalPayment)
    registry.register_strategy("cash", CashPayment)


def demo() -> None:
    """Check out before choosing a strategy, then with two different ones."""
    cart = ShoppingCart()
    cart.checkout(250)

    registry = get_payment_registry()
    cart.set_payment_strategy(registry.get_strategy("credit_card", card_number="1234567890123456"))
    cart.checkout(250)

    cart.set_payment_strategy(registry.get_strategy("paypal", email="buyer@example.com"))
    cart.checkout(99.5)
