"""
Member Status Resolver - paid/complimentary standing and the subscription
backing it.
"""
from typing import Optional

from .models import (
    Member,
    NormalizedPrice,
    Subscription,
    SubscriptionLookup,
    STATUS_COMPED,
    STATUS_PAID,
)
from .price_normalizer import get_price_from_subscription


PAID_STATUSES = frozenset({STATUS_PAID, STATUS_COMPED})
ACTIVE_SUBSCRIPTION_STATUS = "active"


def is_paid_member(member: Optional[Member]) -> bool:
    """Logged-out members are never paid; comped counts as paid."""
    return member is not None and member.status in PAID_STATUSES


def is_complimentary_member(member: Optional[Member]) -> bool:
    return member is not None and member.status == STATUS_COMPED


def get_member_subscription(member: Optional[Member]) -> SubscriptionLookup:
    """
    Find the subscription currently backing a member.

    Precedence:
    1. No member -> NONE. No subscriptions list at all -> IMPLICIT
       (complimentary grant, nothing to bill).
    2. First subscription with status "active", in list order -> ACTIVE.
    3. Nothing active -> NONE, unless the list is empty and the member is
       paid/comped, which is again a grant without a billing record.
    """
    if member is None:
        return SubscriptionLookup.none()

    if member.subscriptions is None:
        return SubscriptionLookup.implicit()

    for subscription in member.subscriptions:
        if subscription.status == ACTIVE_SUBSCRIPTION_STATUS:
            return SubscriptionLookup.active(subscription)

    if not member.subscriptions and is_paid_member(member):
        return SubscriptionLookup.implicit()

    return SubscriptionLookup.none()


def get_member_name(member: Optional[Member]) -> str:
    if member is None:
        return ""
    return member.name or ""


def get_member_email(member: Optional[Member]) -> str:
    if member is None:
        return ""
    return member.email or ""


def get_subscription_from_id(member: Optional[Member], subscription_id: Optional[str]) -> Optional[Subscription]:
    """Look up one of the member's subscriptions by id."""
    if member is None or not member.subscriptions or not subscription_id:
        return None
    for subscription in member.subscriptions:
        if subscription.id == subscription_id:
            return subscription
    return None


def get_member_active_price(member: Optional[Member]) -> Optional[NormalizedPrice]:
    """Normalized price of the member's active subscription, if any."""
    lookup = get_member_subscription(member)
    if not lookup.is_active:
        return None
    return get_price_from_subscription(lookup.subscription)
