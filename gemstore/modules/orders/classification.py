"""Test/live order classification from payment details.

Sandbox credentials leave recognisable traces in the payment ids; on top of
that every currency listed in TEST_CURRENCIES is still processed against
sandbox accounts, and crypto only runs on devnet/testnet.
"""
from typing import Iterable, Optional

from gemstore.modules.orders.schemas import PaymentInfo

STRIPE_TEST_PREFIX = "pi_test_"
PAYPAL_TEST_MARKERS = ("sandbox", "test")


def _currency_is_test(currency: Optional[str], test_currencies: Iterable[str]) -> bool:
    return bool(currency) and currency.upper() in test_currencies


def is_test_order(payment: PaymentInfo, test_currencies: Iterable[str]) -> bool:
    test_currencies = [c.upper() for c in test_currencies]
    method = (payment.payment_method or "").lower()

    if method in ("stripe", "card"):
        return (
            (payment.payment_intent_id or "").startswith(STRIPE_TEST_PREFIX)
            or _currency_is_test(payment.currency, test_currencies)
        )

    if method == "paypal":
        capture_id = payment.capture_id or ""
        return (
            any(marker in capture_id for marker in PAYPAL_TEST_MARKERS)
            or _currency_is_test(payment.currency, test_currencies)
        )

    if method == "crypto":
        # TODO: classify by network once mainnet crypto payments are enabled
        return True

    # Unknown payment method: treat as test
    return True
