# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the middleware identity module."""

import pytest
from pytest_mock import MockerFixture
from starlette.types import ASGIApp, Receive, Scope, Send

from webident.middleware import ScopeKey
from webident.middleware.identity import IdentityMiddleware
from webident.models import MACOS


@pytest.fixture(name="identity_middleware")
def fixture_identity_middleware(mocker: MockerFixture) -> IdentityMiddleware:
    """Create an IdentityMiddleware object for test"""
    asgiapp_mock = mocker.AsyncMock(spec=ASGIApp)
    return IdentityMiddleware(asgiapp_mock)


@pytest.mark.asyncio
async def test_identity_from_headers(
    identity_middleware: IdentityMiddleware,
    scope: Scope,
    receive_mock: Receive,
    send_mock: Send,
) -> None:
    """Test the proper assignment of HostIdentity properties given the request headers."""
    scope["headers"] = [
        (
            b"user-agent",
            (
                b"Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15"
                b" (KHTML, like Gecko) Version/15.1 Safari/605.1.15"
            ),
        ),
        (b"host", b"example.com:8000"),
        (b"accept-language", b"en-US,fr;q=0.5"),
    ]

    await identity_middleware(scope, receive_mock, send_mock)

    host_identity = scope[ScopeKey.HOST_IDENTITY]
    assert host_identity.devicename == "Safari 605.1.15"
    assert host_identity.distro == "Mac OS X 10.15.7"
    assert host_identity.platform == MACOS
    assert host_identity.hostname == "example.com"
    assert host_identity.languages == ["en-US", "fr"]


@pytest.mark.asyncio
async def test_identity_without_headers(
    identity_middleware: IdentityMiddleware,
    scope: Scope,
    receive_mock: Receive,
    send_mock: Send,
) -> None:
    """Test that a request without headers still gets a HostIdentity with fallbacks."""
    scope["headers"] = []

    await identity_middleware(scope, receive_mock, send_mock)

    host_identity = scope[ScopeKey.HOST_IDENTITY]
    assert host_identity.devicename == "Unknown Browser"
    assert host_identity.hostname is None
    assert host_identity.distro is None
    assert host_identity.languages == []


@pytest.mark.asyncio
async def test_identity_invalid_scope_type(
    identity_middleware: IdentityMiddleware,
    receive_mock: Receive,
    send_mock: Send,
) -> None:
    """Test that no identity assignment takes place for an unexpected Scope type."""
    scope: Scope = {"type": "not-http"}

    await identity_middleware(scope, receive_mock, send_mock)

    assert ScopeKey.HOST_IDENTITY not in scope
