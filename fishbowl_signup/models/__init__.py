"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from fishbowl_signup.models import SubscriptionFormValues, ResponseEnvelope

These names refer to the underlying Pydantic models defined in their
respective modules.
"""

from .subscription_request import SubscriptionFormValues  # noqa: F401
from .subscription_response import (  # noqa: F401
    ApiAttributes,
    ApiData,
    ApiMeta,
    ApiResult,
    ResponseEnvelope,
    SubscriptionFailure,
    SubscriptionSuccess,
)
