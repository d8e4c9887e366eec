"""Application entry point: Stripe credential smoke check."""

import asyncio
import logging
import sys

from paywire.config import get_config
from paywire.http.errors import RemoteError
from paywire.stripe.client import LiveStripeClient


async def boot() -> None:
    """
    Boot sequence: load config → build client → list plans.

    Raises:
        SystemExit: On configuration or API errors
    """
    logger = logging.getLogger(__name__)

    try:
        config = get_config()
        client = LiveStripeClient.from_config(config)
        logger.info("Configuration loaded")

        plans = await client.fetch_plans()
        logger.info(f"Stripe credentials OK: {len(plans.data)} plans visible")
        for plan in plans.data:
            logger.info(f"  {plan.id}: {plan.amount} {plan.currency} / {plan.interval.value}")

    except RemoteError as e:
        logger.error(f"Stripe rejected the request: {e.envelope}")
        raise SystemExit(1) from e
    except Exception as e:
        logger.error(f"Boot sequence failed: {e}")
        raise SystemExit(1) from e


def main() -> None:
    """Main entry point with logging configuration."""
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(boot())
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(0)
    except SystemExit:
        raise
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
