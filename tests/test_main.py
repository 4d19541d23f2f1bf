"""Tests for main.py — argument parsing and each audit subcommand."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from core.path_config import FORBIDDEN
from core.path_registry import build_registry
from core.platform_config import PlatformKind
from main import format_row, main, parse_args, run
from policies.default_policies import POLICIES


def _run(argv: list[str], platform: PlatformKind = PlatformKind.LINUX) -> int:
    return run(parse_args(argv), build_registry(platform))


class TestParseArgs:
    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])

    def test_unknown_platform_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--platform", "beos", "presets"])

    def test_denied_and_symlinked_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["list", "--denied", "--symlinked"])


class TestFormatRow:
    def test_flags_rendered_in_order(self) -> None:
        assert format_row("gcc", FORBIDDEN) == "gcc\tno\tyes\tyes\tno"


class TestLookup:
    def test_prints_header_and_rows(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(["lookup", "git", "make"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("tool\t")
        assert lines[1] == "git\tyes\tno\tno\tno"
        assert lines[2] == "make\tyes\tyes\tyes\tno"


class TestList:
    def test_denied_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        _run(["list", "--denied"])
        names = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()[1:]]
        assert "gcc" in names
        assert "pgrep" in names
        assert "git" not in names

    def test_symlinked_on_darwin(self, capsys: pytest.CaptureFixture[str]) -> None:
        _run(["list", "--symlinked"], PlatformKind.DARWIN)
        names = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()[1:]]
        assert "xcrun" in names
        assert "pgrep" in names
        assert "clang" not in names


class TestPresets:
    def test_every_preset_described(self, capsys: pytest.CaptureFixture[str]) -> None:
        _run(["presets"])
        out = capsys.readouterr().out
        for policy in POLICIES.values():
            assert policy["description"] in out


class TestCheck:
    def test_allowed_exit_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(["check", "bash"]) == 0
        assert "allowed: bash" in capsys.readouterr().out

    def test_denied_exit_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(["check", "clang++"]) == 1
        assert "denied" in capsys.readouterr().out


class TestMain:
    def test_platform_flag_overrides_env(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.dict(os.environ, {"PATH_POLICY_PLATFORM": "linux"}, clear=True):
            with pytest.raises(SystemExit) as excinfo:
                main(["--platform", "darwin", "check", "ps"])
        assert excinfo.value.code == 0

    def test_env_platform_used(self) -> None:
        with patch.dict(os.environ, {"PATH_POLICY_PLATFORM": "linux"}, clear=True):
            with pytest.raises(SystemExit) as excinfo:
                main(["check", "ps"])
        assert excinfo.value.code == 1

    def test_configuration_error_exits(self) -> None:
        with patch.dict(os.environ, {"PATH_POLICY_PLATFORM": "beos"}, clear=True):
            with pytest.raises(SystemExit) as excinfo:
                main(["presets"])
        assert excinfo.value.code == 1
