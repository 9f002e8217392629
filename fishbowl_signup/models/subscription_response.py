"""Response models for the Fishbowl subscription API.

Two layers live here.  ``ApiResult`` and its nested models describe the
body Fishbowl returns on success; they are only used on demand, since the
client hands the decoded JSON back untouched.  ``SubscriptionSuccess`` and
``SubscriptionFailure`` are the two variants of the envelope returned by
:func:`~fishbowl_signup.services.subscription_service.SubscriptionClient.subscribe`.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ApiAttributes(_CamelModel):
    """Subscriber attributes echoed back by Fishbowl."""

    brand_schema_id: str | None = None
    puuid: str | None = None
    brand_uuid: str | None = None
    muuid: str | None = None
    email_address: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birthdate: str | None = None
    wedding_anniversary: str | None = None
    zip_code: str | None = None
    store_schema_id: str | None = None
    mobile_phone: str | None = None
    sms_opt_in: bool | None = None
    email_opt_in: bool | None = None
    list_uuid: str | None = None
    acquisition_source_uuid: str | None = None
    ip_address: str | None = None
    request_json: str | None = None
    created_date: str | None = None


class ApiTimestamps(_CamelModel):
    created: str | None = None
    modified: str | None = None


class ApiAuthors(_CamelModel):
    creator: str | None = None
    modifier: str | None = None


class ApiMeta(_CamelModel):
    timestamps: ApiTimestamps = Field(default_factory=ApiTimestamps)
    authors: ApiAuthors = Field(default_factory=ApiAuthors)


class ApiData(_CamelModel):
    """The created subscription resource."""

    uuid: str | None = None
    type: str | None = None
    attributes: ApiAttributes = Field(default_factory=ApiAttributes)
    meta: ApiMeta = Field(default_factory=ApiMeta)
    relationships: dict[str, Any] | None = None


class ApiResult(BaseModel):
    """Top-level body of a successful subscription call."""

    success: bool
    message: str = ""
    data: ApiData | None = None
    errors: dict[str, Any] | None = None
    error_code: str | None = None
    cache_hit: bool = False

    model_config = ConfigDict(extra="allow")


class SubscriptionSuccess(BaseModel):
    """Envelope for a completed round-trip carrying the decoded body."""

    result: Any
    err: None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("result")
    @classmethod
    def _result_present(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("a successful envelope must carry a result")
        return value

    @property
    def ok(self) -> Literal[True]:
        return True

    def api_result(self) -> ApiResult:
        """Parse the raw result into :class:`ApiResult`."""
        return ApiResult.model_validate(self.result)


class SubscriptionFailure(BaseModel):
    """Envelope for any failed call; ``err`` describes what went wrong."""

    result: None = None
    err: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> Literal[False]:
        return False


ResponseEnvelope = Union[SubscriptionSuccess, SubscriptionFailure]
