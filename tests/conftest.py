"""
Pytest configuration and shared member/site/offer fixtures.
"""
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from portal_tool.engine import Member, Offer, Site


def make_price(price_id="price_monthly", stripe_id="stripe_price_1", amount=500,
               currency="USD", nickname="Monthly", **extra):
    data = {
        "id": stripe_id,
        "price_id": price_id,
        "amount": amount,
        "nickname": nickname,
        "currency": currency,
        "interval": "month",
        "type": "recurring",
    }
    data.update(extra)
    return data


def make_subscription(sub_id="sub_1", status="active", price=None):
    return {
        "id": sub_id,
        "status": status,
        "price": price if price is not None else make_price(),
    }


def make_product(product_id, product_type="paid", name=None, monthly_id=None, yearly_id=None):
    product = {"id": product_id, "type": product_type, "name": name or product_id}
    if product_type == "paid":
        product["monthlyPrice"] = {"id": monthly_id or f"{product_id}_monthly", "amount": 500, "currency": "usd"}
        product["yearlyPrice"] = {"id": yearly_id or f"{product_id}_yearly", "amount": 5000, "currency": "usd"}
    return product


# Raw payloads

@pytest.fixture
def free_member_data():
    return {"name": "Jamie Larson", "email": "jamie@example.com", "status": "free", "subscriptions": []}


@pytest.fixture
def paid_member_data():
    return {
        "name": "Jamie Larson",
        "email": "jamie@example.com",
        "status": "paid",
        "subscriptions": [make_subscription("sub_active", "active")],
    }


@pytest.fixture
def single_tier_site_data():
    return {
        "title": "The Blueprint",
        "members_signup_access": "all",
        "products": [
            make_product("free_tier", "free", name="Free"),
            make_product("gold", "paid", name="Gold"),
        ],
    }


@pytest.fixture
def multiple_tier_site_data():
    return {
        "title": "The Blueprint",
        "members_signup_access": "all",
        "products": [
            make_product("free_tier", "free", name="Free"),
            make_product("bronze", "paid", name="Bronze"),
            make_product("silver", "paid", name="Silver"),
            make_product("gold", "paid", name="Gold"),
        ],
    }


# Parsed records

@pytest.fixture
def free_member(free_member_data):
    return Member.from_dict(free_member_data)


@pytest.fixture
def paid_member(paid_member_data):
    return Member.from_dict(paid_member_data)


@pytest.fixture
def paid_member_with_canceled():
    return Member.from_dict({
        "name": "Jamie Larson",
        "status": "paid",
        "subscriptions": [
            make_subscription("sub_old", "canceled", make_price(stripe_id="stripe_old")),
            make_subscription("sub_active", "active"),
            make_subscription("sub_older", "canceled"),
        ],
    })


@pytest.fixture
def paid_member_only_canceled():
    return Member.from_dict({
        "name": "Jamie Larson",
        "status": "paid",
        "subscriptions": [
            make_subscription("sub_old", "canceled"),
            make_subscription("sub_older", "canceled"),
        ],
    })


@pytest.fixture
def complimentary_member():
    """Comped member whose payload carries no subscriptions key."""
    return Member.from_dict({"name": "Jamie Larson", "status": "comped"})


@pytest.fixture
def complimentary_member_with_subscription():
    return Member.from_dict({
        "name": "Jamie Larson",
        "status": "comped",
        "subscriptions": [
            make_subscription("sub_comp", "active", make_price(amount=0, nickname="Complimentary")),
        ],
    })


@pytest.fixture
def single_tier_site(single_tier_site_data):
    return Site.from_dict(single_tier_site_data)


@pytest.fixture
def invite_only_site(single_tier_site_data):
    return Site.from_dict({**single_tier_site_data, "members_signup_access": "invite"})


@pytest.fixture
def multiple_tier_site(multiple_tier_site_data):
    return Site.from_dict(multiple_tier_site_data)


@pytest.fixture
def offer():
    return Offer.from_dict({
        "id": "offer_1",
        "name": "Black Friday",
        "code": "black-friday",
        "status": "active",
        "type": "percent",
        "amount": 20,
        "cadence": "month",
        "currency": None,
        "tier": {"id": "gold", "name": "Gold"},
    })
