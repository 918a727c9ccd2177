"""Tests for transient notices."""

from pawmatch.services.notices import NoticeBoard


def test_notices_expire() -> None:
    board = NoticeBoard(default_ttl_seconds=60)

    board.post("Link copied")
    board.post("Already gone", ttl_seconds=-1)

    assert board.active() == ["Link copied"]


def test_clear_removes_notices() -> None:
    board = NoticeBoard()
    board.post("Search failed")

    board.clear()

    assert board.active() == []
