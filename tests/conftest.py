"""
Pytest fixtures for the test suite.

No test talks to Google: tokeninfo calls are patched at ``requests.get`` or
replaced with a stub ``TokenInfoClient``.
"""
from __future__ import annotations

import time

import pytest

from tabflow_api.google_auth import GoogleAuthConfig


CLIENT_ID = "client-1.apps.googleusercontent.com"


@pytest.fixture
def google_config() -> GoogleAuthConfig:
    return GoogleAuthConfig(client_id=CLIENT_ID, timeout_seconds=5)


@pytest.fixture
def tokeninfo_claims() -> dict:
    """A well-formed tokeninfo answer for CLIENT_ID."""
    return {
        "azp": CLIENT_ID,
        "aud": CLIENT_ID,
        "sub": "110169484474386276334",
        "scope": "openid https://www.googleapis.com/auth/userinfo.email",
        "exp": str(int(time.time()) + 3600),
        "expires_in": "3599",
        "email": "user@example.com",
        "email_verified": "true",
        "access_type": "online",
    }


def make_tab(**overrides) -> dict:
    tab = {
        "title": "Example",
        "url": "https://example.com/",
        "domain": "example.com",
        "favicon": "https://example.com/favicon.ico",
        "lastAccessed": 1700000000000,
    }
    tab.update(overrides)
    return tab


def make_group(**overrides) -> dict:
    group = {"id": "g-1", "name": "Reading", "tabs": [make_tab()]}
    group.update(overrides)
    return group


def make_session(**overrides) -> dict:
    session = {"id": "s-1", "name": "Work", "createdAt": 1700000000000, "groups": [make_group()]}
    session.update(overrides)
    return session


@pytest.fixture
def valid_document() -> dict:
    """Version 1 backup: one session, one group, one tab."""
    return {
        "version": 1,
        "timestamp": "2024-11-14T22:13:20.000Z",
        "sessions": [make_session()],
    }
