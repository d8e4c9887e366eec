"""Stripe client facade: one coroutine per endpoint, bound to a secret key."""

import logging
from typing import Any, Optional, Protocol, runtime_checkable

from paywire.http.auth import BasicAuth
from paywire.http.executor import execute
from paywire.http.request import DecodableRequest
from paywire.stripe import endpoints
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
    StripeErrorEnvelope,
    TokenId,
    VatNumber,
)

logger = logging.getLogger(__name__)

STRIPE_JS_URL = "https://js.stripe.com/v3/"


@runtime_checkable
class StripeClient(Protocol):
    """Everything application code needs from Stripe.

    Tests substitute a fake implementation for the live one.
    """

    js: str

    async def cancel_subscription(self, id: SubscriptionId) -> Subscription: ...

    async def create_customer(
        self,
        token: TokenId,
        description: Optional[str],
        email: Optional[EmailAddress],
        vat_number: Optional[VatNumber],
    ) -> Customer: ...

    async def create_subscription(
        self,
        customer: CustomerId,
        plan: PlanId,
        quantity: int,
        coupon: Optional[CouponId],
    ) -> Subscription: ...

    async def fetch_coupon(self, id: CouponId) -> Coupon: ...

    async def fetch_customer(self, id: CustomerId) -> Customer: ...

    async def fetch_invoice(self, id: InvoiceId) -> Invoice: ...

    async def fetch_invoices(self, customer: CustomerId) -> ListEnvelope[Invoice]: ...

    async def fetch_plans(self) -> ListEnvelope[Plan]: ...

    async def fetch_plan(self, id: PlanId) -> Plan: ...

    async def fetch_subscription(self, id: SubscriptionId) -> Subscription: ...

    async def fetch_upcoming_invoice(self, customer: CustomerId) -> Invoice: ...

    async def invoice_customer(self, customer: CustomerId) -> Invoice: ...

    async def update_customer(self, id: CustomerId, token: TokenId) -> Customer: ...

    async def update_customer_extra_invoice_info(
        self, id: CustomerId, extra_invoice_info: str
    ) -> Customer: ...

    async def update_subscription(
        self,
        current_subscription: Subscription,
        plan: PlanId,
        quantity: int,
        prorate: Optional[bool],
    ) -> Subscription: ...


class LiveStripeClient:
    """
    StripeClient that talks to api.stripe.com.

    Every method builds its request with the matching endpoint function and
    runs it through the executor with HTTP Basic auth (secret key as
    username, empty password). Holds no state besides the credential.
    """

    js = STRIPE_JS_URL

    def __init__(self, secret_key: str, timeout: Optional[float] = None):
        """
        Args:
            secret_key: Stripe secret API key
            timeout: Per-request total timeout in seconds (None for aiohttp's default)

        Raises:
            ValueError: If secret_key is empty
        """
        if not secret_key:
            raise ValueError("Stripe secret key not configured")
        self._auth = BasicAuth(secret_key)
        self._timeout = timeout

    @classmethod
    def from_config(cls, config: Any) -> "LiveStripeClient":
        """Build a client from an AppConfig."""
        return cls(
            config.stripe_secret_key.get_secret_value(),
            timeout=config.http_timeout_seconds,
        )

    async def _run(self, request: Optional[DecodableRequest]) -> Any:
        return await execute(
            request,
            error_type=StripeErrorEnvelope,
            auth=self._auth,
            timeout=self._timeout,
        )

    async def cancel_subscription(self, id: SubscriptionId) -> Subscription:
        return await self._run(endpoints.cancel_subscription(id))

    async def create_customer(
        self,
        token: TokenId,
        description: Optional[str],
        email: Optional[EmailAddress],
        vat_number: Optional[VatNumber],
    ) -> Customer:
        return await self._run(
            endpoints.create_customer(token, description, email, vat_number)
        )

    async def create_subscription(
        self,
        customer: CustomerId,
        plan: PlanId,
        quantity: int,
        coupon: Optional[CouponId],
    ) -> Subscription:
        return await self._run(
            endpoints.create_subscription(customer, plan, quantity, coupon)
        )

    async def fetch_coupon(self, id: CouponId) -> Coupon:
        return await self._run(endpoints.fetch_coupon(id))

    async def fetch_customer(self, id: CustomerId) -> Customer:
        return await self._run(endpoints.fetch_customer(id))

    async def fetch_invoice(self, id: InvoiceId) -> Invoice:
        return await self._run(endpoints.fetch_invoice(id))

    async def fetch_invoices(self, customer: CustomerId) -> ListEnvelope[Invoice]:
        return await self._run(endpoints.fetch_invoices(customer))

    async def fetch_plans(self) -> ListEnvelope[Plan]:
        return await self._run(endpoints.fetch_plans())

    async def fetch_plan(self, id: PlanId) -> Plan:
        return await self._run(endpoints.fetch_plan(id))

    async def fetch_subscription(self, id: SubscriptionId) -> Subscription:
        return await self._run(endpoints.fetch_subscription(id))

    async def fetch_upcoming_invoice(self, customer: CustomerId) -> Invoice:
        return await self._run(endpoints.fetch_upcoming_invoice(customer))

    async def invoice_customer(self, customer: CustomerId) -> Invoice:
        return await self._run(endpoints.invoice_customer(customer))

    async def update_customer(self, id: CustomerId, token: TokenId) -> Customer:
        return await self._run(endpoints.update_customer(id, token))

    async def update_customer_extra_invoice_info(
        self, id: CustomerId, extra_invoice_info: str
    ) -> Customer:
        return await self._run(
            endpoints.update_customer_extra_invoice_info(id, extra_invoice_info)
        )

    async def update_subscription(
        self,
        current_subscription: Subscription,
        plan: PlanId,
        quantity: int,
        prorate: Optional[bool],
    ) -> Subscription:
        """
        Raises:
            NothingToUpdate: If current_subscription has no items
        """
        request = endpoints.update_subscription(current_subscription, plan, quantity, prorate)
        if request is None:
            logger.info(f"Subscription {current_subscription.id} has no items - nothing to update")
        return await self._run(request)
