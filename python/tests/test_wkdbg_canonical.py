"""Canonicalization and drive letter fixing tests."""

from __future__ import annotations

import pytest

from wkdbg import Platform, canonicalize_url, fix_drive_letter_and_slashes, lstrip

WIN = Platform.WINDOWS
OSX = Platform.OSX
LINUX = Platform.LINUX


def test_enforces_windows_separator():
    assert canonicalize_url("c:\\thing\\file.js", platform=WIN) == "c:\\thing\\file.js"
    assert canonicalize_url("c:/thing/file.js", platform=WIN) == "c:\\thing\\file.js"


def test_removes_file_prefix():
    assert canonicalize_url("file:///c:/file.js", platform=WIN) == "c:\\file.js"


def test_lowercases_drive_letter_on_windows():
    assert canonicalize_url("file:///D:/FILE.js", platform=WIN) == "d:\\FILE.js"
    assert canonicalize_url("D:/x/y.js", platform=WIN) == "d:\\x\\y.js"


def test_keeps_drive_letter_case_on_posix():
    assert canonicalize_url("D:\\x\\y.js", platform=LINUX) == "D:/x/y.js"


@pytest.mark.parametrize("platform", [OSX, LINUX])
def test_local_path_starts_with_slash_on_posix(platform):
    assert canonicalize_url("file:///Users/scripts/app.js", platform=platform) == "/Users/scripts/app.js"
    assert canonicalize_url("file:////Users/scripts/app.js", platform=platform) == "/Users/scripts/app.js"


def test_drive_path_behind_file_prefix_on_osx_gets_no_slash():
    assert canonicalize_url("file:///c:/file.js", platform=OSX) == "c:/file.js"


def test_windows_posix_style_path_uses_backslashes():
    assert canonicalize_url("/project/app.js", platform=WIN) == "\\project\\app.js"


@pytest.mark.parametrize("platform", list(Platform))
def test_http_url_unchanged(platform):
    url = "http://site.com/My/Cool/Site/script.js?stuff"
    assert canonicalize_url(url, platform=platform) == url


@pytest.mark.parametrize("platform", list(Platform))
def test_strips_trailing_slash_of_empty_path(platform):
    assert canonicalize_url("http://site.com/", platform=platform) == "http://site.com"
    assert canonicalize_url("http://site.com", platform=platform) == "http://site.com"


def test_trailing_slash_kept_for_directories_and_queries():
    assert canonicalize_url("http://site.com/dir/", platform=WIN) == "http://site.com/dir/"
    assert canonicalize_url("http://site.com/?next=/", platform=WIN) == "http://site.com/?next=/"


def test_bundler_url_unchanged():
    url = "webpack:///webpack/webpackthing"
    assert canonicalize_url(url, platform=WIN) == url


def test_empty_input():
    assert canonicalize_url("", platform=WIN) == ""
    assert canonicalize_url(None, platform=LINUX) == ""


IDEMPOTENCE_INPUTS = [
    "c:/thing/file.js",
    "C:\\thing\\file.js",
    "file:///D:/FILE.js",
    "file:///Users/scripts/app.js",
    "/usr/lib/app.js",
    "relative\\dir/app.js",
    "http://site.com/",
    "http://site.com/a/b.js?x=1",
    "webpack:///",
    "webpack:///./src/app.js",
    "svc:\\\\host\\",
    "file:///",
    "file:///file:///nested.js",
    "abc123!@#",
    "",
]


@pytest.mark.parametrize("platform", list(Platform))
@pytest.mark.parametrize("locator", IDEMPOTENCE_INPUTS)
def test_canonicalize_is_idempotent(locator, platform):
    once = canonicalize_url(locator, platform=platform)
    assert canonicalize_url(once, platform=platform) == once


def test_fix_drive_letter_plain_paths():
    assert fix_drive_letter_and_slashes("C:/path/stuff", platform=WIN) == "c:\\path\\stuff"
    assert fix_drive_letter_and_slashes("c:/path\\stuff", platform=WIN) == "c:\\path\\stuff"
    assert fix_drive_letter_and_slashes("C:\\path", platform=WIN) == "c:\\path"
    assert fix_drive_letter_and_slashes("C:\\", platform=WIN) == "c:\\"


def test_fix_drive_letter_keeps_file_prefix():
    assert fix_drive_letter_and_slashes("file:///C:/path/stuff", platform=WIN) == "file:///c:\\path\\stuff"
    assert fix_drive_letter_and_slashes("file:///c:/path\\stuff", platform=WIN) == "file:///c:\\path\\stuff"
    assert fix_drive_letter_and_slashes("file:///C:\\path", platform=WIN) == "file:///c:\\path"
    assert fix_drive_letter_and_slashes("file:///C:\\", platform=WIN) == "file:///c:\\"


def test_fix_drive_letter_uses_posix_separator():
    assert fix_drive_letter_and_slashes("C:\\path\\stuff", platform=LINUX) == "c:/path/stuff"


def test_fix_drive_letter_ignores_other_input():
    assert fix_drive_letter_and_slashes("/usr/lib", platform=WIN) == "/usr/lib"
    assert fix_drive_letter_and_slashes("http://site.com/", platform=WIN) == "http://site.com/"
    assert fix_drive_letter_and_slashes("", platform=WIN) == ""
    assert fix_drive_letter_and_slashes(None, platform=WIN) == ""


def test_lstrip():
    assert lstrip("test", "te") == "st"
    assert lstrip("asdf", "") == "asdf"
    assert lstrip("asdf", None) == "asdf"
    assert lstrip("asdf", "asdf") == ""
    assert lstrip("asdf", "123") == "asdf"
    assert lstrip("asdf", "sdf") == "asdf"
