"""Unit tests for core enums."""

import pytest

from laakhay.pivotal.core import HTTPMethod, SessionStatus


class TestHTTPMethod:
    @pytest.mark.parametrize("raw", ["get", "GET", "Get", HTTPMethod.GET])
    def test_from_str(self, raw):
        assert HTTPMethod.from_str(raw) is HTTPMethod.GET

    def test_unsupported(self):
        with pytest.raises(ValueError, match="PATCH"):
            HTTPMethod.from_str("PATCH")

    def test_str(self):
        assert str(HTTPMethod.DELETE) == "delete"


class TestSessionStatus:
    def test_terminal_states(self):
        assert not SessionStatus.RUNNING.is_terminal
        assert all(
            status.is_terminal
            for status in (SessionStatus.COMPLETED, SessionStatus.ABORTED, SessionStatus.FAILED)
        )
