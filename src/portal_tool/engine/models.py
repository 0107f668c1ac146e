"""
Data models for the portal engine.

Uses frozen dataclasses for the member, site and offer payloads handed to us
by the data-fetch layer. Every record has a ``from_dict`` constructor that
accepts the deserialized JSON shape and tolerates missing keys.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# Member statuses
STATUS_FREE = "free"
STATUS_PAID = "paid"
STATUS_COMPED = "comped"

# Product types
PRODUCT_FREE = "free"
PRODUCT_PAID = "paid"

# Cadences used in page queries
CADENCE_MONTHLY = "monthly"
CADENCE_YEARLY = "yearly"


@dataclass(frozen=True)
class TraceStep:
    """A single step in the member state resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


# Known raw price keys; anything else passes through untouched
PRICE_FIELDS = ('id', 'price_id', 'amount', 'nickname', 'currency', 'interval')


@dataclass(frozen=True)
class Price:
    """
    Raw price record as provided by the billing backend.

    ``present`` lists which of the known keys the payload actually carried,
    so ``to_dict`` gives back the same shape it was built from.
    """
    id: Optional[str] = None
    price_id: Optional[str] = None
    amount: Optional[int] = None
    nickname: Optional[str] = None
    currency: Optional[str] = None
    interval: Optional[str] = None
    present: tuple[str, ...] = PRICE_FIELDS
    extra: dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['Price']:
        if not isinstance(data, dict):
            return None
        return cls(
            id=data.get('id'),
            price_id=data.get('price_id'),
            amount=data.get('amount'),
            nickname=data.get('nickname'),
            currency=data.get('currency'),
            interval=data.get('interval'),
            present=tuple(k for k in PRICE_FIELDS if k in data),
            extra={k: v for k, v in data.items() if k not in PRICE_FIELDS},
        )

    def to_dict(self) -> dict:
        """Flat dict with pass-through fields merged back in."""
        data = dict(self.extra)
        for name in self.present:
            data[name] = getattr(self, name)
        return data


@dataclass(frozen=True)
class NormalizedPrice:
    """Display-ready price derived from a subscription's raw price."""
    id: Optional[str]
    stripe_price_id: str
    price: float
    name: Optional[str]
    currency: str
    currency_symbol: str
    amount: int
    raw: Price = field(default_factory=Price)

    def to_dict(self) -> dict:
        """Raw fields first, then the renamed/derived overrides."""
        data = self.raw.to_dict()
        data.update({
            'stripe_price_id': self.stripe_price_id,
            'id': self.id,
            'price': self.price,
            'name': self.name,
            'currency': self.currency,
            'currency_symbol': self.currency_symbol,
        })
        return data


@dataclass(frozen=True)
class Subscription:
    """A billing record linking a member to a recurring price."""
    id: Optional[str] = None
    status: Optional[str] = None
    price: Optional[Price] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['Subscription']:
        if not isinstance(data, dict):
            return None
        return cls(
            id=data.get('id'),
            status=data.get('status'),
            price=Price.from_dict(data.get('price')),
        )


@dataclass(frozen=True)
class Member:
    """
    A site visitor account.

    ``subscriptions`` is None when the payload carried no subscriptions key
    at all, and an empty tuple when it carried an empty list.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    status: str = STATUS_FREE
    subscriptions: Optional[tuple[Subscription, ...]] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['Member']:
        if not isinstance(data, dict):
            return None
        subscriptions = None
        raw_subs = data.get('subscriptions')
        if isinstance(raw_subs, list):
            subscriptions = tuple(
                sub for sub in (Subscription.from_dict(s) for s in raw_subs) if sub is not None
            )
        return cls(
            name=data.get('name'),
            email=data.get('email'),
            status=data.get('status') or STATUS_FREE,
            subscriptions=subscriptions,
        )


@dataclass(frozen=True)
class ProductPrice:
    """A monthly or yearly price reference nested in a product."""
    id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['ProductPrice']:
        if not isinstance(data, dict):
            return None
        return cls(id=data.get('id'), amount=data.get('amount'), currency=data.get('currency'))


@dataclass(frozen=True)
class Product:
    """A purchasable tier on the site."""
    id: Optional[str] = None
    type: str = PRODUCT_PAID
    name: Optional[str] = None
    monthly_price: Optional[ProductPrice] = None
    yearly_price: Optional[ProductPrice] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['Product']:
        if not isinstance(data, dict):
            return None
        # Portal payloads use camelCase, admin payloads use snake_case
        monthly = data.get('monthlyPrice', data.get('monthly_price'))
        yearly = data.get('yearlyPrice', data.get('yearly_price'))
        return cls(
            id=data.get('id'),
            type=data.get('type') or PRODUCT_PAID,
            name=data.get('name'),
            monthly_price=ProductPrice.from_dict(monthly),
            yearly_price=ProductPrice.from_dict(yearly),
        )

    def to_dict(self) -> dict:
        def price_dict(p: Optional[ProductPrice]):
            if p is None:
                return None
            return {'id': p.id, 'amount': p.amount, 'currency': p.currency}

        return {
            'id': self.id,
            'type': self.type,
            'name': self.name,
            'monthlyPrice': price_dict(self.monthly_price),
            'yearlyPrice': price_dict(self.yearly_price),
        }


@dataclass(frozen=True)
class Site:
    """Site configuration: products plus the signup mode flag."""
    products: tuple[Product, ...] = ()
    members_signup_access: str = "all"
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['Site']:
        if not isinstance(data, dict):
            return None
        raw_products = data.get('products') or []
        return cls(
            products=tuple(
                p for p in (Product.from_dict(d) for d in raw_products) if p is not None
            ),
            members_signup_access=data.get('members_signup_access') or "all",
            title=data.get('title'),
        )


@dataclass(frozen=True)
class Offer:
    """A promotional discount with a lifecycle status."""
    id: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None  # "percent", "fixed" or "trial"
    amount: Optional[float] = None
    currency: Optional[str] = None  # fixed offers only

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['Offer']:
        if not isinstance(data, dict):
            return None
        return cls(
            id=data.get('id'),
            status=data.get('status'),
            type=data.get('type'),
            amount=data.get('amount'),
            currency=data.get('currency'),
        )


class LookupKind(str, Enum):
    """Outcome of looking up a member's active subscription."""
    NONE = "none"          # definitively no subscription, show free UI
    IMPLICIT = "implicit"  # complimentary grant without a billing record
    ACTIVE = "active"


@dataclass(frozen=True)
class SubscriptionLookup:
    """Three-state active subscription result."""
    kind: LookupKind
    subscription: Optional[Subscription] = None

    @classmethod
    def none(cls) -> 'SubscriptionLookup':
        return cls(kind=LookupKind.NONE)

    @classmethod
    def implicit(cls) -> 'SubscriptionLookup':
        return cls(kind=LookupKind.IMPLICIT)

    @classmethod
    def active(cls, subscription: Subscription) -> 'SubscriptionLookup':
        return cls(kind=LookupKind.ACTIVE, subscription=subscription)

    @property
    def is_active(self) -> bool:
        return self.kind is LookupKind.ACTIVE


@dataclass
class MemberState:
    """Complete result of resolving a member against a site."""
    is_paid: bool
    is_complimentary: bool
    name: str
    email: str
    subscription: SubscriptionLookup
    price: Optional[NormalizedPrice] = None
    invite_only: bool = False
    multiple_products: bool = False
    free_product_id: Optional[str] = None
    offer_active: Optional[bool] = None
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the resolution trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        sub = self.subscription.subscription
        return {
            'is_paid': self.is_paid,
            'is_complimentary': self.is_complimentary,
            'name': self.name,
            'email': self.email,
            'subscription_state': self.subscription.kind.value,
            'subscription_id': sub.id if sub else None,
            'subscription_status': sub.status if sub else None,
            'price': self.price.to_dict() if self.price else None,
            'invite_only': self.invite_only,
            'multiple_products': self.multiple_products,
            'free_product_id': self.free_product_id,
            'offer_active': self.offer_active,
            'trace': [
                {'step': t.step, 'description': t.description, 'value': t.value}
                for t in self.trace
            ],
        }
