"""Stripe REST API binding.

Endpoint functions build request descriptors; LiveStripeClient runs them
against api.stripe.com with the configured secret key.
"""

from paywire.stripe.client import STRIPE_JS_URL, LiveStripeClient, StripeClient
from paywire.stripe.endpoints import STRIPE_API_BASE_URL
from paywire.stripe.models import (
    Coupon,
    CouponId,
    Customer,
    CustomerId,
    Invoice,
    InvoiceId,
    ListEnvelope,
    Plan,
    PlanId,
    StripeError,
    StripeErrorEnvelope,
    Subscription,
    SubscriptionId,
    TokenId,
)

__all__ = [
    # Facade
    "StripeClient",
    "LiveStripeClient",
    "STRIPE_JS_URL",
    "STRIPE_API_BASE_URL",
    # Models
    "Coupon",
    "Customer",
    "Invoice",
    "ListEnvelope",
    "Plan",
    "Subscription",
    "StripeError",
    "StripeErrorEnvelope",
    # Identifiers
    "CouponId",
    "CustomerId",
    "InvoiceId",
    "PlanId",
    "SubscriptionId",
    "TokenId",
]
