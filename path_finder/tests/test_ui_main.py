from __future__ import annotations

from pathlib import Path

import pytest

from path_finder.game import DEFAULT_LEVEL_ROOT, GameState
from path_finder.tracker import TrackerStatus
from path_finder.ui.main import (
    LEVEL_ENV_VAR,
    UIDirectories,
    hud_text,
    main,
    resolve_directories,
)


def test_resolve_directories_returns_package_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)

    directories = resolve_directories()

    assert isinstance(directories, UIDirectories)
    assert directories.level_root == DEFAULT_LEVEL_ROOT
    assert directories.level_root.exists()


def test_resolve_directories_honours_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    level_dir = tmp_path / "levels"
    level_dir.mkdir()
    monkeypatch.setenv(LEVEL_ENV_VAR, str(level_dir))

    assert resolve_directories().level_root == level_dir


def test_resolve_directories_errors_on_missing_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LEVEL_ENV_VAR, str(tmp_path / "missing_levels"))

    with pytest.raises(FileNotFoundError):
        resolve_directories()
    assert resolve_directories(check_exists=False).level_root == tmp_path / "missing_levels"


def test_cli_lists_levels(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)

    exit_code = main(["--list-levels"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Available levels" in output
    assert "First Steps 8x8, 8 walls, optimal 14 steps" in output


def test_cli_lists_unreachable_levels(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    (tmp_path / "split.json").write_text(
        '{"rows": 3, "cols": 3, "walls": [[0, 1], [1, 1], [2, 1]], "start": [0, 0], "goal": [0, 2]}'
    )
    monkeypatch.setenv(LEVEL_ENV_VAR, str(tmp_path))

    assert main(["--list-levels"]) == 0
    assert "split 3x3, 3 walls, optimal unreachable" in capsys.readouterr().out


def test_cli_info_prints_directories(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)

    assert main(["--info"]) == 0
    output = capsys.readouterr().out

    assert "Path Finder UI bootstrap" in output
    assert str(DEFAULT_LEVEL_ROOT) in output


def test_cli_fails_without_levels(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LEVEL_ENV_VAR, str(tmp_path))

    assert main([]) == 1


def test_hud_text_reports_score():
    playing = GameState(
        status=TrackerStatus.DRAWING, steps=3, optimal_steps=None, level=2, has_next_level=True
    )
    won = GameState(
        status=TrackerStatus.WON, steps=6, optimal_steps=4, level=1, has_next_level=True
    )

    assert hud_text(playing) == "Level 2  Steps 3  Optimal -"
    assert hud_text(won) == "Level 1  Steps 6  Optimal 4  Solved! [N] next level"
