"""
Member State Resolver - one-shot resolution of everything the portal needs
to know about a member, with traceability.

Combines the individual helpers:
- Paid / complimentary standing
- Active subscription lookup (three-state)
- Normalized price of the active subscription
- Site tier flags and free product
- Offer eligibility
"""
from typing import Optional

from .member_status import (
    get_member_email,
    get_member_name,
    get_member_subscription,
    is_complimentary_member,
    is_paid_member,
)
from .models import LookupKind, Member, MemberState, Offer, Site
from .offers import is_active_offer
from .price_normalizer import get_price_from_subscription
from .site_query import get_free_product, has_multiple_products, is_invite_only_site


def resolve_member_state(
    member: Optional[Member],
    site: Optional[Site] = None,
    offer: Optional[Offer] = None,
) -> MemberState:
    """
    Resolve member standing against an optional site and offer.

    Args:
        member: Member record, or None for a logged-out visitor
        site: Site configuration, if the caller has one
        offer: Offer being considered, if any

    Returns:
        MemberState dataclass with flags, price and trace
    """
    state = MemberState(
        is_paid=is_paid_member(member),
        is_complimentary=is_complimentary_member(member),
        name=get_member_name(member),
        email=get_member_email(member),
        subscription=get_member_subscription(member),
    )

    if member is None:
        state.add_trace("Member", "No member, treating as logged out")
    else:
        state.add_trace("Member", "Member status", member.status)

    lookup = state.subscription
    if lookup.kind is LookupKind.ACTIVE:
        state.add_trace("Subscription", "Found active subscription", lookup.subscription.id)
        state.price = get_price_from_subscription(lookup.subscription)
        if state.price is not None:
            state.add_trace(
                "Price",
                "Normalized subscription price",
                f"{state.price.currency_symbol}{state.price.price} {state.price.currency}",
            )
        else:
            state.add_trace("Price", "Active subscription has no usable price")
    elif lookup.kind is LookupKind.IMPLICIT:
        state.add_trace("Subscription", "Complimentary access without billing record")
    else:
        state.add_trace("Subscription", "No active subscription")

    if site is not None:
        state.invite_only = is_invite_only_site(site)
        state.multiple_products = has_multiple_products(site)
        free_product = get_free_product(site)
        state.free_product_id = free_product.id if free_product else None
        state.add_trace("Site", "Invite only", str(state.invite_only))
        state.add_trace("Site", "Multiple paid tiers", str(state.multiple_products))
        if free_product is None:
            state.add_trace("Site", "No free tier configured")

    if offer is not None:
        state.offer_active = is_active_offer(offer)
        state.add_trace("Offer", f"Offer {offer.id} status {offer.status}", str(state.offer_active))

    return state
