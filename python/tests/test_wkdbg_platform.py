"""Platform detection and browser lookup tests."""

from __future__ import annotations

import ntpath
import posixpath
import sys
from unittest.mock import MagicMock

import pytest

from wkdbg import BROWSER_CANDIDATES, Platform, exists_checker, get_browser_path, get_platform, platform_from_identifier

WIN_CHROME = "C:\\Program Files\\Google\\Chrome\\Application\\chrome.exe"
WIN_X86_CHROME = "C:\\Program Files (x86)\\Google\\Chrome\\Application\\chrome.exe"
OSX_CHROME = "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome"
LINUX_CHROME = "/usr/bin/google-chrome"


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("win32", Platform.WINDOWS),
        ("darwin", Platform.OSX),
        ("linux", Platform.LINUX),
        ("freebsd", Platform.LINUX),
        ("cygwin", Platform.LINUX),
        ("", Platform.LINUX),
        (None, Platform.LINUX),
    ],
)
def test_platform_from_identifier(identifier, expected):
    assert platform_from_identifier(identifier) is expected


def test_get_platform_reads_callable_source_once():
    source = MagicMock(return_value="darwin")
    assert get_platform(source) is Platform.OSX
    source.assert_called_once_with()


def test_get_platform_accepts_literal_identifier():
    assert get_platform("win32") is Platform.WINDOWS
    assert get_platform("freebsd") is Platform.LINUX


def test_get_platform_defaults_to_host():
    assert get_platform() is platform_from_identifier(sys.platform)


def test_platform_separator_and_path_flavour():
    assert Platform.WINDOWS.sep == "\\"
    assert Platform.OSX.sep == "/"
    assert Platform.LINUX.sep == "/"
    assert Platform.WINDOWS.pathmod is ntpath
    assert Platform.LINUX.pathmod is posixpath
    assert Platform.OSX.is_posix and not Platform.WINDOWS.is_posix


def test_platform_from_name():
    assert Platform.from_name(" Windows ") is Platform.WINDOWS
    with pytest.raises(ValueError):
        Platform.from_name("beos")


def test_browser_osx(fake_stat):
    stat = fake_stat(BROWSER_CANDIDATES[Platform.OSX])
    assert get_browser_path(Platform.OSX, exists=exists_checker(stat)) == OSX_CHROME


def test_browser_win_prefers_program_files(fake_stat):
    stat = fake_stat([WIN_CHROME, WIN_X86_CHROME])
    assert get_browser_path(Platform.WINDOWS, exists=exists_checker(stat)) == WIN_CHROME
    assert stat.calls == [WIN_CHROME]


def test_browser_win_falls_back_to_x86(fake_stat):
    stat = fake_stat([WIN_X86_CHROME])
    assert get_browser_path(Platform.WINDOWS, exists=exists_checker(stat)) == WIN_X86_CHROME
    assert stat.calls == [WIN_CHROME, WIN_X86_CHROME]


def test_browser_linux(fake_stat):
    stat = fake_stat([LINUX_CHROME])
    assert get_browser_path(Platform.LINUX, exists=exists_checker(stat)) == LINUX_CHROME


def test_browser_unknown_os_uses_linux_candidate(fake_stat):
    stat = fake_stat([LINUX_CHROME, OSX_CHROME, WIN_CHROME])
    platform = get_platform("freebsd")
    assert platform is Platform.LINUX
    assert get_browser_path(platform, exists=exists_checker(stat)) == LINUX_CHROME


def test_browser_missing_returns_none(fake_stat):
    stat = fake_stat()
    assert get_browser_path(Platform.WINDOWS, exists=exists_checker(stat)) is None
    assert get_browser_path(Platform.OSX, exists=exists_checker(stat)) is None
