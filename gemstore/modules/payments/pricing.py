"""Checkout price calculation shared by the payment providers. Amounts are returned in cents."""
from typing import Dict, Iterable

FREE_SHIPPING_THRESHOLD = 300
FLAT_SHIPPING = 15
TAX_RATE = 0.13  # HST


def calculate_order_amount(items: Iterable) -> Dict[str, int]:
    """Subtotal, shipping, tax and total in cents for items carrying price and quantity"""
    subtotal = sum(item.price * (item.quantity or 1) for item in items)
    shipping = 0 if subtotal > FREE_SHIPPING_THRESHOLD else FLAT_SHIPPING
    tax = round((subtotal + shipping) * TAX_RATE, 2)
    total = subtotal + shipping + tax
    return {
        "subtotal": round(subtotal * 100),
        "shipping": round(shipping * 100),
        "tax": round(tax * 100),
        "total": round(total * 100),
    }
