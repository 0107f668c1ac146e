"""
Page-Query Resolver - maps "<productId>/<cadence>" routing strings to price
ids and back.
"""
from typing import Optional

from .models import Site, CADENCE_MONTHLY, CADENCE_YEARLY
from .site_query import get_product_cadence_from_price, get_product_from_id


def get_price_id_from_page_query(site: Optional[Site], page_query: Optional[str]) -> Optional[str]:
    """
    Resolve a page query such as "6086eff0823dd7240afc8081/yearly" to a price id.

    Returns None for a missing query, a query without "/", an unknown product
    or an unknown cadence. Routing treats None as "use the site default".
    """
    if not page_query or not isinstance(page_query, str):
        return None

    product_id, sep, cadence = page_query.partition('/')
    if not sep:
        return None

    product = get_product_from_id(site, product_id)
    if product is None:
        return None

    if cadence == CADENCE_YEARLY:
        price = product.yearly_price
    elif cadence == CADENCE_MONTHLY:
        price = product.monthly_price
    else:
        return None

    return price.id if price is not None else None


def get_page_query_for_price(site: Optional[Site], price_id: Optional[str]) -> Optional[str]:
    """Build the page query that points at a given price id."""
    match = get_product_cadence_from_price(site, price_id)
    if match is None:
        return None
    product, cadence = match
    return f"{product.id}/{cadence}"
