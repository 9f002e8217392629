"""Service wrapping the Fishbowl external subscription endpoint.

A single call posts the caller's form values to Fishbowl and returns a
:data:`~fishbowl_signup.models.ResponseEnvelope`.  Transport errors,
non-2xx statuses and undecodable bodies all come back as a
:class:`~fishbowl_signup.models.SubscriptionFailure`; nothing is raised
to the caller and nothing is retried.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx
from loguru import logger
from pydantic import BaseModel

from ..config.fishbowl_config import DEFAULT_HEADERS, SUBSCRIPTION_CREATE_URL
from ..models.subscription_request import SubscriptionFormValues
from ..models.subscription_response import ResponseEnvelope, SubscriptionSuccess
from ..utils.api_client import post
from ..utils.error_handler import (
    HttpStatusError,
    ResponseDecodeError,
    TransportError,
    describe_error,
    handle_subscription_error,
)


def build_request_body(
    form_values: BaseModel | Mapping[str, Any],
) -> dict[str, Any]:
    """Return the JSON body for ``form_values`` without altering any field.

    A :class:`SubscriptionFormValues` is dumped under the API's field
    names.  Any other pydantic model is dumped by alias as well, so its
    aliases decide the wire keys.  A plain mapping is copied key for key.
    """
    if isinstance(form_values, SubscriptionFormValues):
        return form_values.to_request_body()
    if isinstance(form_values, BaseModel):
        return form_values.model_dump(by_alias=True, mode="json")
    return dict(form_values)


class SubscriptionClient:
    """Client for creating Fishbowl subscriptions.

    Parameters
    ----------
    http_client: httpx.AsyncClient, optional
        A client to send requests with.  It is shared by every call and
        never closed here; the owner is responsible for its lifetime.
        When omitted each call opens and closes its own client.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._http_client = http_client

    @handle_subscription_error
    async def subscribe(
        self,
        form_values: BaseModel | Mapping[str, Any],
    ) -> ResponseEnvelope:
        """Subscribe through the Fishbowl API.

        Returns a success envelope holding the decoded JSON body, or a
        failure envelope holding a description of what went wrong.
        """
        body = build_request_body(form_values)
        logger.info("Creating Fishbowl subscription for list {}", body.get("listUuid"))

        try:
            response = await post(
                SUBSCRIPTION_CREATE_URL,
                json=body,
                headers=DEFAULT_HEADERS,
                client=self._http_client,
            )
        except httpx.HTTPError as exc:
            raise TransportError(describe_error(exc)) from exc

        if not response.is_success:
            raise HttpStatusError(response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseDecodeError(describe_error(exc)) from exc
        if data is None:
            raise ResponseDecodeError("Response body decoded to null")

        logger.info("Fishbowl subscription created (status {})", response.status_code)
        return SubscriptionSuccess(result=data)


async def subscribe_through_fishbowl_api(
    form_values: BaseModel | Mapping[str, Any],
) -> ResponseEnvelope:
    """Subscribe with a one-off client; see :meth:`SubscriptionClient.subscribe`."""
    return await SubscriptionClient().subscribe(form_values)


def get_subscription_client() -> SubscriptionClient:
    """Dependency provider returning a client with per-call connections."""
    return SubscriptionClient()


__all__ = [
    "SubscriptionClient",
    "build_request_body",
    "get_subscription_client",
    "subscribe_through_fishbowl_api",
]
