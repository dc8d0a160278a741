from datetime import datetime, timezone

import pytest

from capcode.derivation.models import TransformConfig


@pytest.fixture()
def transform_config() -> TransformConfig:
    """Default Argon2id parameters with an explicit deployment salt."""
    return TransformConfig(salt=b"test-salt")


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
