"""Unit tests for login and reply response parsing."""

from __future__ import annotations

import logging

import pytest

from mynx.reddit.api import classify_reply, parse_login, session_cookie
from mynx.reddit.core import APIError, ReplyStatus
from mynx.reddit.runtime.rest import RawResponse


class TestParseLogin:
    """Test parse_login()."""

    def test_success(self, json_response):
        """Test a modhash marks success and the session cookie is kept."""
        response = json_response(
            {"json": {"errors": [], "data": {"modhash": "mh", "cookie": "x"}}},
            set_cookies=["reddit_session=abc%2C; Domain=reddit.com; Path=/; HttpOnly"],
        )

        login = parse_login("alice", response)

        assert login.succeeded
        assert login.name == "alice"
        assert login.modhash == "mh"
        assert login.cookie == "reddit_session=abc%2C"
        assert login.errors == []

    def test_rejected(self, json_response, caplog):
        """Test reddit's errors are carried and the failure is logged."""
        errors = [["WRONG_PASSWORD", "invalid password", "passwd"]]
        response = json_response({"json": {"errors": errors}})

        with caplog.at_level(logging.WARNING, logger="mynx.reddit.api.actions"):
            login = parse_login("alice", response)

        assert not login.succeeded
        assert login.errors == errors
        assert login.cookie is None
        record = next(r for r in caplog.records if r.getMessage() == "login_failed")
        assert record.user == "alice"

    def test_no_modhash_and_no_errors(self, json_response):
        """Test an unexplained failure is reported as unknown."""
        login = parse_login("alice", json_response({"json": {"data": {}}}))
        assert not login.succeeded
        assert login.errors == ["unknown"]

    def test_invalid_json(self):
        """Test a non-JSON body raises."""
        with pytest.raises(APIError):
            parse_login("alice", RawResponse(status=200, headers={}, body="<html>"))


class TestSessionCookie:
    """Test session_cookie()."""

    def test_first_cookie_without_attributes(self):
        """Test only the first cookie's name=value is used."""
        response = RawResponse(
            status=200,
            headers={},
            body="",
            set_cookies=["a=1; Path=/", "b=2"],
        )
        assert session_cookie(response) == "a=1"

    def test_no_cookie(self):
        """Test a response without cookies."""
        assert session_cookie(RawResponse(status=200, headers={}, body="")) is None


class TestClassifyReply:
    """Test classify_reply()."""

    @pytest.mark.parametrize(
        "body,status",
        [
            ('{"jquery": [[0, 1, "call", [{"contentText": "hi"}]]]}', ReplyStatus.SUBMITTED),
            ('[".error.RATELIMIT.field-ratelimit"]', ReplyStatus.RATE_LIMIT),
            ('[".error.USER_REQUIRED"]', ReplyStatus.USER_REQUIRED),
            ('[".error.DELETED_COMMENT.field-parent"]', ReplyStatus.PARENT_DELETED),
            ('[".error.DELETED_LINK.field-parent"]', ReplyStatus.PARENT_DELETED),
            ("something else", ReplyStatus.UNKNOWN),
        ],
    )
    def test_statuses(self, body, status):
        """Test each response body maps to its status."""
        result = classify_reply(body)
        assert result.status is status
        assert result.body == body

    def test_first_match_wins(self):
        """Test a body with content is submitted even if it mentions an error."""
        body = "contentText .error.USER_REQUIRED"
        assert classify_reply(body).status is ReplyStatus.SUBMITTED
