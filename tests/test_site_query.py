"""
Tests for site/product queries and page query resolution.
"""
import pytest

from conftest import make_product

from portal_tool.engine import (
    Site,
    get_free_product,
    get_page_query_for_price,
    get_paid_products,
    get_price_id_from_page_query,
    get_product_cadence_from_price,
    get_product_from_id,
    has_multiple_products,
    has_only_free_plan,
    is_invite_only_site,
)


class TestIsInviteOnlySite:

    def test_invite_only(self, invite_only_site):
        assert is_invite_only_site(invite_only_site) is True

    def test_open_site(self, single_tier_site):
        assert is_invite_only_site(single_tier_site) is False

    def test_paid_only_signup(self, single_tier_site_data):
        site = Site.from_dict({**single_tier_site_data, "members_signup_access": "paid"})
        assert is_invite_only_site(site) is False

    def test_no_site(self):
        assert is_invite_only_site(None) is False


class TestHasMultipleProducts:

    def test_multiple_tier_site(self, multiple_tier_site):
        assert has_multiple_products(multiple_tier_site) is True

    def test_single_tier_site(self, single_tier_site):
        """One free plus one paid tier is still single tier"""
        assert has_multiple_products(single_tier_site) is False

    def test_two_paid_one_free(self):
        site = Site.from_dict({"products": [
            make_product("free_tier", "free"),
            make_product("bronze"),
            make_product("gold"),
        ]})
        assert has_multiple_products(site) is True

    def test_duplicate_paid_product_counted_once(self):
        site = Site.from_dict({"products": [make_product("gold"), make_product("gold")]})
        assert has_multiple_products(site) is False

    def test_empty_site(self):
        assert has_multiple_products(Site()) is False


class TestPaidProducts:

    def test_paid_products_in_order(self, multiple_tier_site):
        assert [p.id for p in get_paid_products(multiple_tier_site)] == ["bronze", "silver", "gold"]

    def test_only_free_plan(self):
        site = Site.from_dict({"products": [make_product("free_tier", "free")]})
        assert has_only_free_plan(site) is True

    def test_not_only_free_plan(self, single_tier_site):
        assert has_only_free_plan(single_tier_site) is False


class TestGetFreeProduct:

    def test_free_tier_for_site(self, single_tier_site):
        product = get_free_product(single_tier_site)
        assert product.type == "free"
        assert product.id == "free_tier"

    def test_free_tier_for_mixed_site(self, multiple_tier_site):
        assert get_free_product(multiple_tier_site).type == "free"

    def test_paid_only_site(self):
        site = Site.from_dict({"members_signup_access": "invite", "products": [make_product("gold")]})
        assert get_free_product(site) is None


class TestProductLookups:

    def test_product_from_id(self, multiple_tier_site):
        assert get_product_from_id(multiple_tier_site, "silver").name == "Silver"

    def test_product_from_unknown_id(self, multiple_tier_site):
        assert get_product_from_id(multiple_tier_site, "platinum") is None

    def test_cadence_from_price(self, multiple_tier_site):
        product, cadence = get_product_cadence_from_price(multiple_tier_site, "silver_yearly")
        assert product.id == "silver"
        assert cadence == "yearly"

    def test_cadence_from_unknown_price(self, multiple_tier_site):
        assert get_product_cadence_from_price(multiple_tier_site, "nope") is None


class TestGetPriceIdFromPageQuery:

    def test_yearly(self, multiple_tier_site):
        product = multiple_tier_site.products[1]
        page_query = f"{product.id}/yearly"
        assert get_price_id_from_page_query(multiple_tier_site, page_query) == product.yearly_price.id

    def test_monthly(self, multiple_tier_site):
        assert get_price_id_from_page_query(multiple_tier_site, "gold/monthly") == "gold_monthly"

    def test_snake_case_payload(self):
        site = Site.from_dict({"products": [{
            "id": "gold", "type": "paid",
            "monthly_price": {"id": "m1"}, "yearly_price": {"id": "y1"},
        }]})
        assert get_price_id_from_page_query(site, "gold/yearly") == "y1"

    @pytest.mark.parametrize("page_query", [
        "gold",               # no separator
        "platinum/yearly",    # unknown product
        "gold/weekly",        # unknown cadence
        "gold/yearly/extra",  # trailing junk
        "/yearly",
        "",
        None,
    ])
    def test_unresolvable(self, multiple_tier_site, page_query):
        assert get_price_id_from_page_query(multiple_tier_site, page_query) is None

    def test_product_without_price(self, single_tier_site):
        assert get_price_id_from_page_query(single_tier_site, "free_tier/monthly") is None

    def test_no_site(self):
        assert get_price_id_from_page_query(None, "gold/yearly") is None

    def test_page_query_for_price(self, multiple_tier_site):
        page_query = get_page_query_for_price(multiple_tier_site, "bronze_monthly")
        assert page_query == "bronze/monthly"
        assert get_price_id_from_page_query(multiple_tier_site, page_query) == "bronze_monthly"
