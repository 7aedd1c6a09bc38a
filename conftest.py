"""
pytest 全域 fixtures

提供：
- 暫存輸出目錄與小型執行設定
- 不呼叫 git 的 DryRunVersionControl
- 真實 git 測試用的隔離環境（不讀使用者 / 系統 gitconfig）
"""

import shutil

import pytest

from scaffold.registry import TemplateRegistry
from scaffold.schema import ScaffoldSpec
from scaffold.vcs import DryRunVersionControl

SMALL_CATALOG = ["Dashboard", "VirtualMachine", "Storage"]


@pytest.fixture
def output_dir(tmp_path):
    """每個測試獨立的輸出目錄（尚未建立）"""
    return tmp_path / "cloud_tests"


@pytest.fixture
def registry():
    return TemplateRegistry()


@pytest.fixture
def dry_vcs():
    """只記錄呼叫的版本控制"""
    return DryRunVersionControl()


@pytest.fixture
def small_spec(output_dir):
    """三個模組的執行設定"""
    return ScaffoldSpec(output_dir=str(output_dir), modules=list(SMALL_CATALOG))


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """
    隔離的 git 環境：沒有 git 就 skip。

    使用暫存的全域 gitconfig，避免使用者的簽章 / hook 設定影響測試。
    """
    if shutil.which("git") is None:
        pytest.skip("本機沒有 git")
    gitconfig = tmp_path / "gitconfig"
    gitconfig.write_text(
        "[user]\n"
        "\tname = Scaffold Bot\n"
        "\temail = scaffold@example.com\n"
        "[commit]\n"
        "\tgpgsign = false\n"
        "[init]\n"
        "\tdefaultBranch = main\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.delenv("GIT_AUTHOR_DATE", raising=False)
    monkeypatch.delenv("GIT_COMMITTER_DATE", raising=False)
    return gitconfig
