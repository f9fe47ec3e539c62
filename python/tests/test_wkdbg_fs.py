"""Existence probe tests."""

from __future__ import annotations

from wkdbg import exists_checker, exists_sync


def test_exists_false_when_stat_raises():
    def stat(path):
        if "notfound" in path:
            raise RuntimeError("Not found")

    assert exists_sync("exists", stat=stat) is True
    assert exists_sync("thisfilenotfound", stat=stat) is False


def test_exists_folds_permission_errors(fake_stat):
    stat = fake_stat(error=PermissionError)
    assert exists_sync("/root/secret", stat=stat) is False
    assert stat.calls == ["/root/secret"]


def test_exists_on_real_filesystem(tmp_path):
    present = tmp_path / "present.js"
    present.write_text("// js", encoding="utf-8")
    assert exists_sync(str(present)) is True
    assert exists_sync(str(tmp_path)) is True
    assert exists_sync(str(tmp_path / "missing.js")) is False


def test_exists_malformed_path_is_false():
    assert exists_sync("bad\0path") is False
    assert exists_sync("") is False
    assert exists_sync(None) is False


def test_exists_checker_binds_probe(fake_stat):
    stat = fake_stat(["/a"])
    check = exists_checker(stat)
    assert check("/a") is True
    assert check("/b") is False
    assert stat.calls == ["/a", "/b"]
