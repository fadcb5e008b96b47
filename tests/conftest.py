from __future__ import annotations

from typing import Iterator

import pytest

from proxied import config


@pytest.fixture(autouse=True)
def default_config() -> Iterator[None]:
    config.opaque_hides_proxy_marker = True
    yield
    config.opaque_hides_proxy_marker = True


@pytest.fixture
def proxy_marker_kept() -> Iterator[None]:
    config.opaque_hides_proxy_marker = False
    yield
