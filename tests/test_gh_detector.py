"""Tests for gh detection (infra/gh_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from gh_wrap.infra.gh_detector import (
    GhStatus,
    _platform_install_commands,
    detect_gh,
)


# ---------------------------------------------------------------------------
# detect_gh
# ---------------------------------------------------------------------------

class TestDetectGh:
    @patch("gh_wrap.infra.gh_detector.shutil.which")
    def test_found(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/bin/gh"  # type: ignore[union-attr]
        status = detect_gh()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.install_commands == ()

    @patch("gh_wrap.infra.gh_detector.shutil.which")
    def test_not_found(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[union-attr]
        status = detect_gh()

        assert status.found is False
        assert status.path is None
        assert len(status.install_commands) > 0

    @patch("gh_wrap.infra.gh_detector.shutil.which", return_value=None)
    def test_looks_up_given_path(self, mock_which: object) -> None:
        detect_gh("/opt/tools/gh")
        mock_which.assert_called_once_with("/opt/tools/gh")  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("gh_wrap.infra.gh_detector.platform.system", return_value="Windows")
    def test_windows_commands(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands()
        assert "winget install --id GitHub.cli" in cmds

    @patch("gh_wrap.infra.gh_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands()
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)

    @patch("gh_wrap.infra.gh_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: object) -> None:
        assert _platform_install_commands() == ("brew install gh",)

    @patch("gh_wrap.infra.gh_detector.platform.system", return_value="Plan9")
    def test_unknown_platform_falls_back_to_url(self, _mock_sys: object) -> None:
        (only,) = _platform_install_commands()
        assert "cli.github.com" in only


class TestGhStatus:
    def test_frozen(self) -> None:
        status = GhStatus(found=True, path=Path("/usr/bin/gh"), install_commands=())
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
