"""Unit tests for core enums."""

from mynx.reddit.core import EntityKind, ReplyStatus, VoteDirection


class TestEntityKind:
    """Test EntityKind."""

    def test_string_values(self):
        """Test kinds compare equal to their string values."""
        assert EntityKind.COMMENT == "comment"


class TestVoteDirection:
    """Test VoteDirection."""

    def test_values(self):
        """Test api/vote dir values."""
        assert [int(d) for d in VoteDirection] == [1, 0, -1]
        assert VoteDirection["DOWN"] == -1


def test_reply_status_values():
    """Test ReplyStatus string values."""
    assert ReplyStatus.PARENT_DELETED.value == "parent_deleted"
    assert ReplyStatus("forbidden") is ReplyStatus.FORBIDDEN
