"""Stripe response models and typed identifiers.

Field names are snake_case exactly as the live API returns them. Every date
field is a Timestamp (seconds since the epoch on the wire).
"""

from enum import Enum
from typing import Generic, NewType, Optional, TypeVar, Union

from pydantic import BaseModel, Field

from paywire.http.types import Timestamp

T = TypeVar("T")

# Typed identifiers
CardId = NewType("CardId", str)
ChargeId = NewType("ChargeId", str)
CouponId = NewType("CouponId", str)
CustomerId = NewType("CustomerId", str)
InvoiceId = NewType("InvoiceId", str)
LineItemId = NewType("LineItemId", str)
PlanId = NewType("PlanId", str)
SubscriptionId = NewType("SubscriptionId", str)
SubscriptionItemId = NewType("SubscriptionItemId", str)
TokenId = NewType("TokenId", str)
EmailAddress = NewType("EmailAddress", str)
VatNumber = NewType("VatNumber", str)


class CouponDuration(str, Enum):
    """How long a coupon applies."""

    FOREVER = "forever"
    ONCE = "once"
    REPEATING = "repeating"


class PlanInterval(str, Enum):
    """Billing interval of a plan."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle status."""

    ACTIVE = "active"
    CANCELED = "canceled"
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    PAST_DUE = "past_due"
    PAUSED = "paused"
    TRIALING = "trialing"
    UNPAID = "unpaid"


class ListEnvelope(BaseModel, Generic[T]):
    """Paginated list wrapper ({"object": "list", "data": [...]})."""

    data: list[T]
    has_more: bool = False
    url: Optional[str] = None


class Card(BaseModel):
    id: CardId
    brand: str
    customer: Optional[CustomerId] = None
    exp_month: int
    exp_year: int
    last4: str


class Charge(BaseModel):
    id: ChargeId
    amount: int  # cents
    created: Timestamp
    paid: Optional[bool] = None
    source: Optional[Card] = None


class Coupon(BaseModel):
    id: CouponId
    amount_off: Optional[int] = None  # cents
    currency: Optional[str] = None
    duration: CouponDuration
    duration_in_months: Optional[int] = None
    name: Optional[str] = None
    percent_off: Optional[float] = None
    valid: bool


class Discount(BaseModel):
    coupon: Coupon
    start: Optional[Timestamp] = None
    end: Optional[Timestamp] = None


class Plan(BaseModel):
    id: PlanId
    amount: int  # cents
    created: Timestamp
    currency: str
    interval: PlanInterval
    interval_count: int = 1
    metadata: dict[str, str] = Field(default_factory=dict)
    nickname: Optional[str] = None


class Customer(BaseModel):
    id: CustomerId
    business_vat_id: Optional[VatNumber] = None
    default_source: Optional[CardId] = None
    description: Optional[str] = None
    email: Optional[EmailAddress] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    sources: Optional[ListEnvelope[Card]] = None


class SubscriptionItem(BaseModel):
    id: SubscriptionItemId
    created: Timestamp
    plan: Plan
    quantity: int


class Subscription(BaseModel):
    """A subscription; customer is expanded when requested with expand[]=customer."""

    id: SubscriptionId
    cancel_at_period_end: bool
    canceled_at: Optional[Timestamp] = None
    created: Timestamp
    current_period_start: Timestamp
    current_period_end: Timestamp
    customer: Union[Customer, CustomerId]
    discount: Optional[Discount] = None
    ended_at: Optional[Timestamp] = None
    items: ListEnvelope[SubscriptionItem]
    plan: Optional[Plan] = None
    quantity: Optional[int] = None
    start_date: Optional[Timestamp] = None
    status: SubscriptionStatus


class LineItem(BaseModel):
    id: LineItemId
    amount: int  # cents
    description: Optional[str] = None
    plan: Optional[Plan] = None
    quantity: Optional[int] = None
    subscription: Optional[SubscriptionId] = None


class Invoice(BaseModel):
    """An invoice; id is missing on upcoming (not yet finalized) invoices."""

    id: Optional[InvoiceId] = None
    amount_due: int  # cents
    amount_paid: int  # cents
    charge: Optional[Union[Charge, ChargeId]] = None
    created: Timestamp
    customer: CustomerId
    discount: Optional[Discount] = None
    lines: ListEnvelope[LineItem]
    number: Optional[str] = None
    paid: Optional[bool] = None
    period_start: Timestamp
    period_end: Timestamp
    subtotal: int  # cents
    total: int  # cents


class StripeError(BaseModel):
    """Fields Stripe reports for a rejected request."""

    type: str
    message: Optional[str] = None
    code: Optional[str] = None
    param: Optional[str] = None
    decline_code: Optional[str] = None


class StripeErrorEnvelope(BaseModel):
    error: StripeError
