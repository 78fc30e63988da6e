"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def project_id() -> str:
    value = os.environ.get("PIVOTAL_TRACKER_PROJECT_ID")
    if not value:
        pytest.skip("PIVOTAL_TRACKER_PROJECT_ID is not set")
    return value
