"""Engine subpackage - pure member, price and site resolution logic."""
from .currency import get_currency_symbol, is_same_currency, format_number, format_price
from .member_status import (
    is_paid_member,
    is_complimentary_member,
    get_member_subscription,
    get_member_name,
    get_member_email,
    get_subscription_from_id,
    get_member_active_price,
)
from .price_normalizer import get_price_from_subscription
from .site_query import (
    is_invite_only_site,
    has_multiple_products,
    has_only_free_plan,
    get_free_product,
    get_paid_products,
    get_product_from_id,
    get_product_cadence_from_price,
)
from .offers import is_active_offer, get_offer_discounted_amount
from .page_query import get_price_id_from_page_query, get_page_query_for_price
from .resolver import resolve_member_state
from .models import (
    Member,
    Subscription,
    Price,
    NormalizedPrice,
    Site,
    Product,
    ProductPrice,
    Offer,
    LookupKind,
    SubscriptionLookup,
    MemberState,
)

__all__ = [
    'get_currency_symbol', 'is_same_currency', 'format_number', 'format_price',
    'is_paid_member', 'is_complimentary_member', 'get_member_subscription',
    'get_member_name', 'get_member_email', 'get_subscription_from_id',
    'get_member_active_price', 'get_price_from_subscription',
    'is_invite_only_site', 'has_multiple_products', 'has_only_free_plan',
    'get_free_product', 'get_paid_products', 'get_product_from_id',
    'get_product_cadence_from_price', 'is_active_offer',
    'get_offer_discounted_amount', 'get_price_id_from_page_query',
    'get_page_query_for_price', 'resolve_member_state',
    'Member', 'Subscription', 'Price', 'NormalizedPrice', 'Site', 'Product',
    'ProductPrice', 'Offer', 'LookupKind', 'SubscriptionLookup', 'MemberState',
]
