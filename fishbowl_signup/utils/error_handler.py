"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..models.subscription_response import SubscriptionFailure


class SubscriptionError(Exception):
    """Exception raised when a subscription call fails."""

    pass


class TransportError(SubscriptionError):
    """The request never produced a response (DNS, connect, reset...)."""

    pass


class HttpStatusError(SubscriptionError):
    """A response arrived but its status code is outside 2xx."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"HTTP Error | Status: {status_code}")


class ResponseDecodeError(SubscriptionError):
    """The response body could not be decoded as a JSON result."""

    pass


def describe_error(exc: BaseException) -> str:
    """Return a non-empty, human readable description of ``exc``."""
    return str(exc) or exc.__class__.__name__


async def subscription_exception_handler(request: Request, exc: SubscriptionError) -> JSONResponse:
    """Convert a SubscriptionError into an HTTP 502 response shaped like an envelope."""
    logger.error("SubscriptionError occurred: {}", exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"result": None, "err": describe_error(exc)},
    )

# ---------------------------------------------------------------------------
# Decorator for async client methods

from functools import wraps
from typing import Any, Awaitable, Callable


def handle_subscription_error(
    func: Callable[..., Awaitable[Any]],
) -> Callable[..., Awaitable[Any]]:
    """Decorator turning any failure of a subscription call into a failure envelope.

    Expected failures (:class:`SubscriptionError` subclasses) are logged as
    warnings; anything else is logged with its traceback.  In both cases
    the caller receives a
    :class:`~fishbowl_signup.models.SubscriptionFailure` whose ``err`` is
    the exception message, so the wrapped coroutine never raises.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except SubscriptionError as exc:
            logger.warning("Subscription failed: {}", exc)
            return SubscriptionFailure(err=describe_error(exc))
        except Exception as exc:
            logger.exception("Unexpected error in {}", func.__name__)
            return SubscriptionFailure(err=describe_error(exc))

    return wrapper
