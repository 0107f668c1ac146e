"""
Offer Evaluator - whether a promotional offer can be used and what it does
to a price.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .currency import is_same_currency
from .models import Offer


OFFER_ACTIVE = "active"


def is_active_offer(offer: Optional[Offer]) -> bool:
    """Expiry is already folded into status upstream; only status matters."""
    return offer is not None and offer.status == OFFER_ACTIVE


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_offer_discounted_amount(offer: Optional[Offer], amount: int, currency: Optional[str] = None) -> int:
    """
    Apply an offer to an amount in minor units.

    Percent offers take ``offer.amount`` percent off, rounded half up to whole
    minor units. Fixed offers subtract ``offer.amount`` when the offer's
    currency matches ``currency``; a fixed offer in another currency needs
    recalculating upstream, so the amount is left as is. Trial offers,
    inactive offers and offers without a numeric amount leave the price
    alone. Never goes below zero.
    """
    if not is_active_offer(offer) or not _is_number(offer.amount):
        return amount

    if offer.type == 'percent':
        discount = (Decimal(amount) * Decimal(str(offer.amount)) / 100).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
        return max(0, amount - int(discount))

    if offer.type == 'fixed':
        if offer.currency and currency and not is_same_currency(offer.currency, currency):
            return amount
        return max(0, amount - int(offer.amount))

    return amount
