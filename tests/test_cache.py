"""Unit tests for digest-based change detection."""

from __future__ import annotations

import typing as typ

from ds_pages.generator import CacheReason, check_cache, content_digest, should_write

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_digest_is_stable_and_content_sensitive() -> None:
    assert content_digest("<p>a</p>") == content_digest("<p>a</p>")
    assert content_digest("<p>a</p>") != content_digest("<p>b</p>")
    assert len(content_digest("")) == len(content_digest("x" * 10_000))


def test_missing_file_requires_write(tmp_path: Path) -> None:
    """A page that was never generated must be written."""
    decision = check_cache("<html></html>", tmp_path / "missing" / "index.html")
    assert decision.changed
    assert decision.reason is CacheReason.MISSING
    assert should_write("", tmp_path / "nope.html")


def test_identical_content_is_skipped(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("<html>same</html>", encoding="utf-8")
    decision = check_cache("<html>same</html>", path)
    assert not decision.changed
    assert decision.reason is CacheReason.UNCHANGED


def test_changed_content_requires_write(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("<html>old</html>", encoding="utf-8")
    decision = check_cache("<html>new</html>", path)
    assert decision.changed
    assert decision.reason is CacheReason.CHANGED


def test_unreadable_path_fails_open(tmp_path: Path) -> None:
    """Read errors other than a missing file also count as changed."""
    directory_in_place_of_file = tmp_path / "index.html"
    directory_in_place_of_file.mkdir()
    decision = check_cache("<html></html>", directory_in_place_of_file)
    assert decision.changed
    assert decision.reason is CacheReason.UNREADABLE


def test_undecodable_file_fails_open(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_bytes(b"\xff\xfe\xfa")
    decision = check_cache("<html></html>", path)
    assert decision.changed
    assert decision.reason is CacheReason.UNREADABLE


def test_cache_check_does_not_modify_file(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("original", encoding="utf-8")
    check_cache("replacement", path)
    assert path.read_text(encoding="utf-8") == "original"
