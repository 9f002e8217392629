"""Client for the Fishbowl external subscription API."""

from .models import ResponseEnvelope, SubscriptionFailure, SubscriptionFormValues, SubscriptionSuccess  # noqa: F401
from .services.subscription_service import SubscriptionClient, subscribe_through_fishbowl_api  # noqa: F401

__version__ = "0.1.0"
