# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the unit test directory."""

from typing import Any, Optional, Sequence

import pytest

from tests.fixture_types import IdentityFixture
from webident.context import StaticBrowserContext
from webident.identity import BrowserIdentity


@pytest.fixture(name="identity_for")
def fixture_identity_for() -> IdentityFixture:
    """Return a function that will create a BrowserIdentity over fixed browser values."""

    def identity_for(
        user_agent: Optional[str] = None,
        document_domain: Optional[str] = None,
        languages: Optional[Sequence[Any]] = None,
    ) -> BrowserIdentity:
        """Create a BrowserIdentity backed by a StaticBrowserContext."""
        return BrowserIdentity(
            StaticBrowserContext(
                user_agent=user_agent, document_domain=document_domain, languages=languages
            )
        )

    return identity_for
