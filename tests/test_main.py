"""Tests for the bouncer command line."""

from pathlib import Path
from unittest.mock import patch

import pytest

from bouncer.adapters.base import GitPlatformError
from bouncer.main import main, parse_args
from bouncer.services.actions import BounceReport


@pytest.fixture(autouse=True)
def logging_setup():
    with patch("bouncer.main.BouncerLogging") as cls:
        yield cls


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.delenv("BOT_REPOSITORY", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN_FILE", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    path = tmp_path / "config.yaml"
    path.write_text("bot:\n  github_username: bouncer-bot\n  repository: owner/repo\n")
    return path


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.config == Path("config.yaml")
    assert not args.dry_run
    assert not args.comment_only
    assert not args.loop
    assert not args.check


def test_check_prints_ok(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """--check validates config and exits 0 without running."""
    with patch("bouncer.services.pipeline.run_bouncer") as run:
        assert main(["--config", str(config_file), "--check"]) == 0
    run.assert_not_called()
    assert "Config OK: owner/repo" in capsys.readouterr().out


def test_missing_required_option_exits_1(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Configuration errors fail before any network call."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN_FILE", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text("bot:\n  repository: owner/repo\n")
    with patch("bouncer.services.pipeline.run_bouncer") as run:
        assert main(["--config", str(path)]) == 1
    run.assert_not_called()


def test_flags_override_config(config_file: Path) -> None:
    """--dry-run and --comment-only are applied to the run config."""
    with patch("bouncer.services.pipeline.run_bouncer", return_value=BounceReport()) as run:
        assert main(["-c", str(config_file), "--dry-run", "--comment-only"]) == 0
    config = run.call_args[0][0]
    assert config.bouncer.dry_run is True
    assert config.bouncer.comment_only is True


def test_dry_run_marks_log_lines(config_file: Path, logging_setup) -> None:
    """--dry-run is passed to the logging setup."""
    with patch("bouncer.services.pipeline.run_bouncer", return_value=BounceReport()):
        main(["-c", str(config_file), "--dry-run"])
    logging_setup.return_value.setup.assert_called_once_with(dry_run=True)


def test_run_error_exits_1(config_file: Path) -> None:
    """An uncaught API error is logged and exit code is 1."""
    with patch("bouncer.services.pipeline.run_bouncer", side_effect=GitPlatformError("500: boom")):
        assert main(["-c", str(config_file)]) == 1


def test_loop_mode(config_file: Path) -> None:
    """--loop hands over to the scheduler; Ctrl-C exits 0."""
    with patch("bouncer.scheduler.run_scheduler_loop", side_effect=KeyboardInterrupt) as loop:
        assert main(["-c", str(config_file), "--loop"]) == 0
    loop.assert_called_once()
