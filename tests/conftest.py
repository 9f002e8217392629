from __future__ import annotations

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def form_values() -> dict[str, object]:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
        "phoneNumber": "5551234567",
        "zipCode": "94107",
        "birthdayMonth": 5,
        "birthdayDay": 17,
        "birthdayYear": 1990,
        "receiveSms": True,
        "storeUuid": "6b1f4c1e-0b1c-4c47-8f0e-3f3c2e1a9d10",
        "joinLoyaltyProgram": False,
        "tag": None,
        "campaignUuid": None,
        "source": "website",
        "brandUuid": "2c4e6a8b-1d3f-4a5b-9c7d-0e2f4a6b8c0d",
        "listUuid": "9f8e7d6c-5b4a-4392-8170-6f5e4d3c2b1a",
    }


@pytest.fixture
def api_body() -> dict[str, object]:
    return {
        "success": True,
        "message": "Subscription created",
        "data": {
            "uuid": "0d1c2b3a-4f5e-4d6c-8b7a-9f0e1d2c3b4a",
            "type": "subscription",
            "attributes": {
                "brandSchemaId": "brand_1",
                "puuid": "p-1",
                "brandUuid": "2c4e6a8b-1d3f-4a5b-9c7d-0e2f4a6b8c0d",
                "muuid": "m-1",
                "emailAddress": "jane.doe@example.com",
                "firstName": "Jane",
                "lastName": "Doe",
                "birthdate": "1990-05-17",
                "weddingAnniversary": None,
                "zipCode": "94107",
                "storeSchemaId": "store_1",
                "mobilePhone": "5551234567",
                "smsOptIn": True,
                "emailOptIn": True,
                "listUuid": None,
                "acquisitionSourceUuid": "a-1",
                "ipAddress": "203.0.113.7",
                "requestJson": None,
                "createdDate": "2024-05-01T12:00:00Z",
            },
            "meta": {
                "timestamps": {"created": None, "modified": None},
                "authors": {"creator": None, "modifier": None},
            },
            "relationships": None,
        },
        "errors": None,
        "error_code": None,
        "cache_hit": False,
    }
