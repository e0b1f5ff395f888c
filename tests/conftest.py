"""Test configuration and fixtures."""

import base64
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from userflow.config import get_settings
from userflow.main import create_app

TEST_USERNAME = "b2c-connector"
TEST_PASSWORD = "s3cret-pass"


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header carrying the configured test credentials."""
    return {
        "Authorization": "Basic " + base64.b64encode(f"{TEST_USERNAME}:{TEST_PASSWORD}".encode("utf-8")).decode("ascii"),
        "Content-Type": "application/json",
    }


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Create test client for API tests."""
    monkeypatch.setenv("BASIC_AUTH_USERNAME", TEST_USERNAME)
    monkeypatch.setenv("BASIC_AUTH_PASSWORD", TEST_PASSWORD)
    monkeypatch.setenv("LOG_FORMAT", "text")
    get_settings.cache_clear()
    app = create_app()
    with TestClient(app) as c:
        yield c
    get_settings.cache_clear()


@pytest.fixture
def sample_submit_payload() -> dict[str, Any]:
    """Sample OnAttributeCollectionSubmit request from Entra External ID."""
    return {
        "type": "microsoft.graph.authenticationEvent.attributeCollectionSubmit",
        "source": "/tenants/aaaabbbb-0000-cccc-1111-dddd2222eeee/applications/11112222-bbbb-3333-cccc-4444dddd5555",
        "data": {
            "@odata.type": "microsoft.graph.onAttributeCollectionSubmitCalloutData",
            "tenantId": "aaaabbbb-0000-cccc-1111-dddd2222eeee",
            "authenticationEventListenerId": "00001111-aaaa-2222-bbbb-3333cccc4444",
            "customAuthenticationExtensionId": "11112222-bbbb-3333-cccc-4444dddd5555",
            "userSignUpInfo": {
                "attributes": {
                    "email": {
                        "@odata.type": "microsoft.graph.stringDirectoryAttributeValue",
                        "value": "user@contoso.test",
                        "attributeType": "builtIn",
                    },
                    "city": {
                        "@odata.type": "microsoft.graph.stringDirectoryAttributeValue",
                        "value": "Oslo",
                        "attributeType": "builtIn",
                    },
                },
            },
        },
    }
