"""
版本控制介面

排程器只依賴兩個能力：stage(paths) 與 commit(message, author_date, committer_date)。
產生前另外確認 is_repository / has_staged_changes。
    GitClient             : 實際呼叫 git（subprocess，無 timeout，失敗即拋例外）
    DryRunVersionControl  : 只記錄呼叫，不執行任何外部程式（預覽 / 測試用）

git 指令契約：
    git rev-parse --show-toplevel     (必須等於輸出目錄)
    git diff --cached --quiet         (index 必須是乾淨的)
    git add -- <path>...
    GIT_AUTHOR_DATE=... GIT_COMMITTER_DATE=... git commit -m <message>
日期格式為本地時間 YYYY-MM-DDTHH:MM:SS。
"""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path

from config.config import Config
from core.exceptions import GitCommandError, GitNotFoundError, VersionControlError
from utils.logger import logger

GIT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_git_date(when: datetime) -> str:
    return when.strftime(GIT_DATE_FORMAT)


class VersionControl(ABC):
    """
    版本控制基底類別

    子類別覆寫 stage / commit 即可接到排程器。
    """

    def is_repository(self) -> bool:
        return True

    def init_repository(self) -> None:
        pass

    def has_staged_changes(self) -> bool:
        return False

    @abstractmethod
    def stage(self, paths: list[str]) -> None:
        """把檔案加入 index"""

    @abstractmethod
    def commit(self, message: str, author_date: datetime,
               committer_date: datetime) -> None:
        """以指定的 author / committer 日期提交"""


class GitClient(VersionControl):
    """透過 subprocess 執行 git"""

    def __init__(self, root: str | Path, executable: str | None = None,
                 identity: dict | None = None):
        self.root = Path(root)
        self.executable = executable or Config.GIT_BIN
        self.identity = dict(identity) if identity is not None else Config.git_identity()

    def run(self, *args: str, env: dict | None = None,
            check: bool = True) -> subprocess.CompletedProcess[str]:
        """
        執行 git 指令（阻塞直到結束，不設 timeout）。

        Raises:
            GitNotFoundError: 找不到 git 執行檔
            GitCommandError: check=True 且回傳非 0
        """
        cmd = [self.executable, *args]
        full_env = None
        if env or self.identity:
            full_env = {**os.environ, **self.identity, **(env or {})}

        logger.debug(f"$ {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=str(self.root),
                capture_output=True,
                text=True,
                env=full_env,
            )
        except FileNotFoundError as e:
            raise GitNotFoundError(self.executable) from e

        if check and result.returncode != 0:
            raise GitCommandError(cmd, result.returncode,
                                  result.stderr or result.stdout)
        return result

    def is_repository(self) -> bool:
        """root 本身是 work tree 的最上層（位於其他 repository 裡的子目錄不算）"""
        result = self.run("rev-parse", "--show-toplevel", check=False)
        if result.returncode != 0:
            return False
        toplevel = result.stdout.strip()
        return bool(toplevel) and Path(toplevel).resolve() == self.root.resolve()

    def init_repository(self) -> None:
        self.run("init")
        logger.info(f"已初始化 git repository: {self.root}")

    def has_staged_changes(self) -> bool:
        """
        index 是否已有暫存變更。git commit 會提交整個 index，
        這些變更會被混進第一個 batch。
        """
        args = ("diff", "--cached", "--quiet")
        result = self.run(*args, check=False)
        if result.returncode in (0, 1):
            return result.returncode == 1
        raise GitCommandError([self.executable, *args], result.returncode,
                              result.stderr or result.stdout)

    def stage(self, paths: list[str]) -> None:
        if not paths:
            raise VersionControlError("git add 至少需要一個路徑")
        self.run("add", "--", *paths)

    def commit(self, message: str, author_date: datetime,
               committer_date: datetime) -> None:
        self.run(
            "commit", "-m", message,
            env={
                "GIT_AUTHOR_DATE": format_git_date(author_date),
                "GIT_COMMITTER_DATE": format_git_date(committer_date),
            },
        )


class DryRunVersionControl(VersionControl):
    """只記錄 stage / commit 呼叫"""

    def __init__(self):
        self.calls: list[tuple] = []

    def stage(self, paths: list[str]) -> None:
        self.calls.append(("add", tuple(paths)))

    def commit(self, message: str, author_date: datetime,
               committer_date: datetime) -> None:
        self.calls.append((
            "commit", message,
            format_git_date(author_date), format_git_date(committer_date),
        ))

    @property
    def commits(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "commit"]
