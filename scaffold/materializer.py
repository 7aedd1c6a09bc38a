"""
File Materializer
把 Artifact 寫到輸出根目錄下的標準路徑。

- ensure_directory: 冪等建立目錄（含所有中間層）
- write_file:       無條件覆寫
- write_batch:      先把同一個 commit batch 的檔案全部寫到暫存檔，
                    暫存階段任何一個失敗就清掉暫存檔並拋出 FileWriteError，正式檔案不動；
                    之後逐檔 os.replace，每個檔案的替換是原子的，
                    但替換階段中途失敗時，已替換的檔案不會還原。

注意：重複對同一個目錄執行會直接覆寫既有檔案。
"""

from __future__ import annotations

import os
from pathlib import Path

from core.exceptions import FileWriteError
from scaffold.layout import CANONICAL_DIRS
from scaffold.schema import Artifact
from utils.logger import logger


class FileMaterializer:
    """檔案輸出"""

    def __init__(self, root: str | Path):
        self.root = Path(root).resolve()

    def resolve(self, relative: str | Path) -> Path:
        return self.root / Path(relative)

    def ensure_directory(self, path: str | Path) -> Path:
        """已存在則不動作，否則建立所有缺少的上層目錄"""
        target = Path(path)
        if not target.is_absolute():
            target = self.resolve(target)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(str(target), e) from e
        return target

    def ensure_layout(self) -> list[Path]:
        """建立所有標準目錄"""
        return [self.ensure_directory(d) for d in CANONICAL_DIRS]

    def write_file(self, path: str | Path, content: str) -> Path:
        """寫入（覆寫）單一檔案"""
        target = Path(path)
        if not target.is_absolute():
            target = self.resolve(target)
        self.ensure_directory(target.parent)
        try:
            target.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            raise FileWriteError(str(target), e) from e
        logger.debug(f"寫入 {target}")
        return target

    def write_batch(self, artifacts: list[Artifact]) -> list[Path]:
        """
        寫入同一批 Artifact。

        暫存檔全部寫成功才開始替換正式檔案；替換是逐檔原子操作，
        替換途中失敗只清掉剩下的暫存檔，已替換的檔案保留。

        Returns:
            正式檔案路徑列表（與 artifacts 同順序）
        """
        staged: list[tuple[Path, Path]] = []
        try:
            for artifact in artifacts:
                target = self.resolve(artifact.path)
                self.ensure_directory(target.parent)
                temp = self._write_temp(target, artifact.content)
                staged.append((temp, target))
        except FileWriteError:
            self._discard(staged)
            raise

        written: list[Path] = []
        for temp, target in staged:
            try:
                os.replace(temp, target)
            except OSError as e:
                self._discard(staged)
                raise FileWriteError(str(target), e) from e
            written.append(target)
            logger.debug(f"寫入 {target}")
        return written

    # ── 內部方法 ──

    @staticmethod
    def _write_temp(target: Path, content: str) -> Path:
        temp = target.with_name(f".{target.name}.tmp")
        try:
            temp.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            temp.unlink(missing_ok=True)
            raise FileWriteError(str(target), e) from e
        return temp

    @staticmethod
    def _discard(staged: list[tuple[Path, Path]]) -> None:
        for temp, _ in staged:
            temp.unlink(missing_ok=True)
