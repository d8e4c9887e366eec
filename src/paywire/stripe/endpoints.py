"""Stripe endpoint functions: one pure request builder per API operation."""

from typing import Any, Optional

from paywire.http.form import params
from paywire.http.request import DecodableRequest, Delete, Get, Method, Post, build_request
from paywire.stripe.models import (
    Coupon,
    CouponId,
    Customer,
    CustomerId,
    EmailAddress,
    Invoice,
    InvoiceId,
    ListEnvelope,
    Plan,
    PlanId,
    Subscription,
    SubscriptionId,
    TokenId,
    VatNumber,
)

STRIPE_API_BASE_URL = "https://api.stripe.com/v1/"


def stripe_request(path: str, result_type: Any, method: Method = Get()) -> DecodableRequest:
    """Build a request against the Stripe API origin."""
    return build_request(STRIPE_API_BASE_URL, path, result_type, method)


def cancel_subscription(id: SubscriptionId) -> DecodableRequest[Subscription]:
    return stripe_request(
        f"subscriptions/{id}?expand[]=customer",
        Subscription,
        Delete(params(at_period_end=True)),
    )


def create_customer(
    token: TokenId,
    description: Optional[str],
    email: Optional[EmailAddress],
    vat_number: Optional[VatNumber],
) -> DecodableRequest[Customer]:
    return stripe_request(
        "customers",
        Customer,
        Post(
            params(
                business_vat_id=vat_number,
                description=description,
                email=email,
                source=token,
            )
        ),
    )


def create_subscription(
    customer: CustomerId,
    plan: PlanId,
    quantity: int,
    coupon: Optional[CouponId],
) -> DecodableRequest[Subscription]:
    return stripe_request(
        "subscriptions?expand[]=customer",
        Subscription,
        Post(
            params(
                customer=customer,
                items=[{"plan": plan, "quantity": quantity}],
                coupon=coupon,
            )
        ),
    )


def fetch_coupon(id: CouponId) -> DecodableRequest[Coupon]:
    return stripe_request(f"coupons/{id}", Coupon)


def fetch_customer(id: CustomerId) -> DecodableRequest[Customer]:
    return stripe_request(f"customers/{id}", Customer)


def fetch_invoice(id: InvoiceId) -> DecodableRequest[Invoice]:
    return stripe_request(f"invoices/{id}?expand[]=charge", Invoice)


def fetch_invoices(customer: CustomerId) -> DecodableRequest[ListEnvelope[Invoice]]:
    """List up to 100 invoices for a customer, with charges expanded."""
    return stripe_request(
        f"invoices?customer={customer}&expand[]=data.charge&limit=100",
        ListEnvelope[Invoice],
    )


def fetch_plans() -> DecodableRequest[ListEnvelope[Plan]]:
    return stripe_request("plans", ListEnvelope[Plan])


def fetch_plan(id: PlanId) -> DecodableRequest[Plan]:
    return stripe_request(f"plans/{id}", Plan)


def fetch_subscription(id: SubscriptionId) -> DecodableRequest[Subscription]:
    return stripe_request(f"subscriptions/{id}?expand[]=customer", Subscription)


def fetch_upcoming_invoice(customer: CustomerId) -> DecodableRequest[Invoice]:
    return stripe_request(
        f"invoices/upcoming?customer={customer}&expand[]=charge",
        Invoice,
    )


def invoice_customer(customer: CustomerId) -> DecodableRequest[Invoice]:
    """Create an invoice for the customer's pending invoice items right away."""
    return stripe_request("invoices", Invoice, Post(params(customer=customer)))


def update_customer(id: CustomerId, token: TokenId) -> DecodableRequest[Customer]:
    """Replace the customer's default payment source."""
    return stripe_request(f"customers/{id}", Customer, Post(params(source=token)))


def update_customer_extra_invoice_info(
    id: CustomerId, extra_invoice_info: str
) -> DecodableRequest[Customer]:
    """Store free-form text printed on the customer's invoices."""
    return stripe_request(
        f"customers/{id}",
        Customer,
        Post(params(metadata={"extraInvoiceInfo": extra_invoice_info})),
    )


def update_subscription(
    current_subscription: Subscription,
    plan: PlanId,
    quantity: int,
    prorate: Optional[bool],
) -> Optional[DecodableRequest[Subscription]]:
    """
    Move a subscription's first item to a new plan and quantity.

    Any applied coupon is cleared. Proration is left to Stripe's default
    when prorate is None.

    Args:
        current_subscription: Subscription as last fetched
        plan: Plan to switch the first item to
        quantity: New seat count
        prorate: Whether Stripe should prorate the change

    Returns:
        Request descriptor, or None if the subscription has no items
        (there is nothing to update)
    """
    if not current_subscription.items.data:
        return None
    item = current_subscription.items.data[0]

    return stripe_request(
        f"subscriptions/{current_subscription.id}?expand[]=customer",
        Subscription,
        Post(
            params(
                coupon="",
                items=[{"id": item.id, "plan": plan, "quantity": quantity}],
                prorate=prorate,
            )
        ),
    )
