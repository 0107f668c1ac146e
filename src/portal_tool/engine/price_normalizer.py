"""
Price Normalizer - turns a subscription's raw billing price into a
display-ready price.
"""
from typing import Optional

from .currency import get_currency_symbol
from .models import NormalizedPrice, Subscription


def get_price_from_subscription(subscription: Optional[Subscription]) -> Optional[NormalizedPrice]:
    """
    Normalize the price attached to a subscription.

    Renames the billing ids (``stripe_price_id`` <- raw ``id``, ``id`` <- raw
    ``price_id``), converts ``amount`` from minor units into ``price``, lower
    cases the currency and adds its symbol. Unrecognised raw fields pass
    through untouched.

    Returns None when there is no subscription, no price, or the price is
    missing its ``id`` or an integer ``amount``; that is the normal state for
    free members. A non-string currency is treated as missing.
    """
    if subscription is None or subscription.price is None:
        return None

    raw = subscription.price
    if not raw.id or isinstance(raw.amount, bool) or not isinstance(raw.amount, int):
        return None

    currency = raw.currency if isinstance(raw.currency, str) else ""
    return NormalizedPrice(
        id=raw.price_id,
        stripe_price_id=raw.id,
        price=raw.amount / 100,
        name=raw.nickname,
        currency=currency.lower(),
        currency_symbol=get_currency_symbol(currency),
        amount=raw.amount,
        raw=raw,
    )
