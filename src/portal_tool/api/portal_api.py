"""
Portal API - FastAPI router exposing member, price, site and offer resolution.
"""
import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

from ..engine import (
    Member,
    Offer,
    Site,
    Subscription,
    get_free_product,
    get_offer_discounted_amount,
    get_paid_products,
    get_price_from_subscription,
    get_price_id_from_page_query,
    has_multiple_products,
    has_only_free_plan,
    is_active_offer,
    is_invite_only_site,
    resolve_member_state,
)

logger = logging.getLogger("portal_tool.api")

router = APIRouter(prefix="/api/portal", tags=["portal"])


# Pydantic models for API. Payload shapes are owned by the billing/content
# backends, so unknown keys are kept and handed to the engine as-is.

class PassThrough(BaseModel):
    model_config = ConfigDict(extra="allow")


class MemberStateRequest(BaseModel):
    """Request model for resolving member state."""
    member: Optional[dict[str, Any]] = None
    site: Optional[dict[str, Any]] = None
    offer: Optional[dict[str, Any]] = None


class PriceRequest(BaseModel):
    """Request model for normalizing a subscription price."""
    subscription: Optional[dict[str, Any]] = None


class SiteRequest(BaseModel):
    """Request model for site summary."""
    site: dict[str, Any]


class PageQueryRequest(BaseModel):
    """Request model for page query resolution."""
    site: dict[str, Any]
    page_query: Optional[str] = None


class PageQueryResponse(BaseModel):
    price_id: Optional[str]


class OfferRequest(BaseModel):
    """Request model for offer evaluation."""
    offer: dict[str, Any]
    amount: Optional[int] = None
    currency: Optional[str] = None


class OfferResponse(BaseModel):
    active: bool
    discounted_amount: Optional[int]


class SiteSummaryResponse(BaseModel):
    """Response model for site summary."""
    invite_only: bool
    multiple_products: bool
    only_free_plan: bool
    free_product: Optional[PassThrough]
    paid_products: list[PassThrough]


# Endpoints

@router.post("/member-state")
async def member_state(req: MemberStateRequest):
    """Resolve paid standing, subscription and price for a member."""
    try:
        state = resolve_member_state(
            Member.from_dict(req.member),
            Site.from_dict(req.site),
            Offer.from_dict(req.offer),
        )
        logger.debug("Member state resolved:\n%s", state.get_trace_text())
        return state.to_dict()
    except Exception as e:
        logger.exception("Member state resolution failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/price")
async def subscription_price(req: PriceRequest):
    """Normalize a subscription price. Returns null for free/missing prices."""
    try:
        price = get_price_from_subscription(Subscription.from_dict(req.subscription))
        return price.to_dict() if price else None
    except Exception as e:
        logger.exception("Price normalization failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/site-summary", response_model=SiteSummaryResponse)
async def site_summary(req: SiteRequest):
    """Tier flags and products for a site."""
    try:
        site = Site.from_dict(req.site)
        free_product = get_free_product(site)
        return SiteSummaryResponse(
            invite_only=is_invite_only_site(site),
            multiple_products=has_multiple_products(site),
            only_free_plan=has_only_free_plan(site),
            free_product=PassThrough(**free_product.to_dict()) if free_product else None,
            paid_products=[PassThrough(**p.to_dict()) for p in get_paid_products(site)],
        )
    except Exception as e:
        logger.exception("Site summary failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/page-query", response_model=PageQueryResponse)
async def page_query(req: PageQueryRequest):
    """Resolve a "<productId>/<cadence>" page query to a price id."""
    price_id = get_price_id_from_page_query(Site.from_dict(req.site), req.page_query)
    if price_id is None:
        logger.info("Page query %r did not resolve, using site default", req.page_query)
    return PageQueryResponse(price_id=price_id)


@router.post("/offer", response_model=OfferResponse)
async def offer_eligibility(req: OfferRequest):
    """Check whether an offer is usable and apply it to an optional amount."""
    try:
        offer = Offer.from_dict(req.offer)
        discounted = None
        if req.amount is not None:
            discounted = get_offer_discounted_amount(offer, req.amount, req.currency)
        return OfferResponse(active=is_active_offer(offer), discounted_amount=discounted)
    except Exception as e:
        logger.exception("Offer evaluation failed")
        raise HTTPException(status_code=500, detail=str(e))
