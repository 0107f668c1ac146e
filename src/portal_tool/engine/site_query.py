"""
Site/Product Query - tier cardinality, invite-only mode and product lookups
over the site configuration.
"""
from typing import Optional

from .models import (
    Product,
    Site,
    CADENCE_MONTHLY,
    CADENCE_YEARLY,
    PRODUCT_FREE,
    PRODUCT_PAID,
)


SIGNUP_ACCESS_INVITE = "invite"


def is_invite_only_site(site: Optional[Site]) -> bool:
    return site is not None and site.members_signup_access == SIGNUP_ACCESS_INVITE


def get_paid_products(site: Optional[Site]) -> list[Product]:
    """Paid products in site order, first occurrence of each id wins."""
    if site is None:
        return []
    seen = set()
    products = []
    for product in site.products:
        if product.type != PRODUCT_PAID or product.id in seen:
            continue
        seen.add(product.id)
        products.append(product)
    return products


def has_multiple_products(site: Optional[Site]) -> bool:
    """True when the site sells more than one paid tier. Free tiers don't count."""
    return len(get_paid_products(site)) > 1


def has_only_free_plan(site: Optional[Site]) -> bool:
    return not get_paid_products(site)


def get_free_product(site: Optional[Site]) -> Optional[Product]:
    if site is None:
        return None
    for product in site.products:
        if product.type == PRODUCT_FREE:
            return product
    return None


def get_product_from_id(site: Optional[Site], product_id: Optional[str]) -> Optional[Product]:
    if site is None or not product_id:
        return None
    for product in site.products:
        if product.id == product_id:
            return product
    return None


def get_product_cadence_from_price(site: Optional[Site], price_id: Optional[str]) -> Optional[tuple[Product, str]]:
    """
    Find which product and cadence a price id belongs to.

    Returns (product, "monthly" | "yearly") or None.
    """
    if site is None or not price_id:
        return None
    for product in site.products:
        if product.monthly_price is not None and product.monthly_price.id == price_id:
            return product, CADENCE_MONTHLY
        if product.yearly_price is not None and product.yearly_price.id == price_id:
            return product, CADENCE_YEARLY
    return None
