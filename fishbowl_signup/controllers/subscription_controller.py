"""API controller for subscription signups.

Exposes a single route that forwards a signup form to Fishbowl.  The
route is registered in ``fishbowl_signup.main``.
"""

from fastapi import APIRouter, Depends
from loguru import logger

from ..models.subscription_request import SubscriptionFormValues
from ..models.subscription_response import SubscriptionSuccess
from ..services.subscription_service import SubscriptionClient, get_subscription_client
from ..utils.error_handler import SubscriptionError

router = APIRouter(prefix="", tags=["Subscriptions"])


@router.post("/subscriptions", response_model=SubscriptionSuccess)
async def create_subscription_endpoint(
    form_values: SubscriptionFormValues,
    client: SubscriptionClient = Depends(get_subscription_client),
) -> SubscriptionSuccess:
    """Create a Fishbowl subscription from a submitted signup form.

    The response body mirrors the client's envelope.  A failed call is
    reported with status 502 and the error text in ``err``.
    """
    logger.info("Received subscription request for source: {}", form_values.source)
    envelope = await client.subscribe(form_values)
    if not envelope.ok:
        raise SubscriptionError(envelope.err)
    return envelope
