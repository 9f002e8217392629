"""Request model for the Fishbowl subscription API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionFormValues(BaseModel):
    """Values collected by a signup form and sent to Fishbowl unchanged.

    Attributes use Python names while the aliases carry the exact
    camelCase keys the API expects.  Either spelling is accepted on
    input.  ``tag`` and ``campaign_uuid`` are optional and are still
    sent as ``null`` when absent; nothing is filtered out of the body.
    """

    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone_number: str = Field(..., alias="phoneNumber")
    zip_code: str = Field(..., alias="zipCode")
    birthday_month: int = Field(..., alias="birthdayMonth")
    birthday_day: int = Field(..., alias="birthdayDay")
    birthday_year: int = Field(..., alias="birthdayYear")
    receive_sms: bool = Field(..., alias="receiveSms")
    store_uuid: str = Field(..., alias="storeUuid")
    join_loyalty_program: bool = Field(..., alias="joinLoyaltyProgram")
    tag: str | None = None
    campaign_uuid: str | None = Field(default=None, alias="campaignUuid")
    source: str
    brand_uuid: str = Field(..., alias="brandUuid")
    list_uuid: str = Field(..., alias="listUuid")

    model_config = ConfigDict(populate_by_name=True)

    def to_request_body(self) -> dict[str, Any]:
        """Return the JSON-ready body keyed by the API's field names."""
        return self.model_dump(by_alias=True, mode="json")
