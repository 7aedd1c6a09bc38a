"""
Scaffold Engine (核心引擎)
串接 registry / materializer / scheduler，一次產生完整的雲端測試專案與 git 歷史。

固定流程（不依內容分支）：
    1. 共用 helpers        → commit (固定日期)
    2. 測試資料 JSON        → commit (固定日期)
    3. 依目錄順序每個模組   → 4 個檔案 → 1 個 commit (base_date + i*5 天)
    4. 兩個 VM 維護測試     → 各 1 個 commit (固定的較晚日期)

使用方式：
    1. 程式化呼叫：
        engine = ScaffoldEngine(ScaffoldSpec(output_dir="./cloud_tests"))
        engine.generate()

    2. 從 JSON / YAML 設定檔：
        engine = ScaffoldEngine.from_file("scaffold.yaml")
        engine.generate()

    3. CLI：
        python -m scaffold --output ./cloud_tests --init
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from config.config import Config
from core.exceptions import ConfigError, VersionControlError
from scaffold.catalog import build_catalog
from scaffold.layout import ProjectLayout
from scaffold.materializer import FileMaterializer
from scaffold.registry import TemplateRegistry
from scaffold.scheduler import CommitScheduler
from scaffold.schema import Artifact, ArtifactKind, CommitBatch, ScaffoldSpec
from scaffold.vcs import DryRunVersionControl, GitClient, VersionControl, format_git_date
from utils.logger import logger


@dataclass(frozen=True)
class PlannedStep:
    """一個 batch：要寫的檔案 + 要送出的 commit"""
    artifacts: tuple[Artifact, ...]
    batch: CommitBatch


class ScaffoldEngine:
    """測試專案產生引擎"""

    def __init__(self, spec: ScaffoldSpec, vcs: VersionControl | None = None):
        self.spec = spec
        if not spec.output_dir:
            raise ConfigError("必須指定 output_dir")
        self.output = Path(spec.output_dir).resolve()
        self.catalog = build_catalog(spec.modules)
        self.registry = TemplateRegistry(ProjectLayout(spec.ext))
        self.materializer = FileMaterializer(self.output)
        if vcs is None:
            vcs = GitClient(self.output) if spec.commit else DryRunVersionControl()
        self.vcs = vcs
        self.scheduler = CommitScheduler.from_spec(spec, vcs)

    @classmethod
    def from_file(cls, path: str, vcs: VersionControl | None = None) -> "ScaffoldEngine":
        """從 JSON / YAML 設定檔建立"""
        data = Config.load_spec(path)
        return cls(ScaffoldSpec.from_dict(data), vcs=vcs)

    def plan(self) -> list[PlannedStep]:
        """
        依固定順序算出所有 batch（純計算，不寫檔、不呼叫 git）。
        """
        registry = self.registry
        scheduler = self.scheduler
        steps: list[PlannedStep] = []

        helpers = registry.build_artifact(ArtifactKind.SHARED_UTILITY)
        steps.append(PlannedStep((helpers,), scheduler.utility_batch([helpers.path])))

        data = registry.build_artifact(ArtifactKind.FIXTURE_DATA)
        steps.append(PlannedStep((data,), scheduler.data_batch([data.path])))

        for index, module in enumerate(self.catalog):
            artifacts = tuple(registry.build_module_artifacts(module))
            batch = scheduler.module_batch(
                index, module.name, [a.path for a in artifacts]
            )
            steps.append(PlannedStep(artifacts, batch))

        for sequence in range(1, len(scheduler.maintenance_dates()) + 1):
            update = registry.build_artifact(
                ArtifactKind.MAINTENANCE_TEST, sequence=sequence
            )
            steps.append(PlannedStep(
                (update,), scheduler.maintenance_batch(sequence, [update.path])
            ))

        return steps

    def generate(self) -> dict:
        """
        產生完整測試專案並依序 commit。

        任何錯誤都直接往上拋，不 catch、不重試、不回滾。

        Returns:
            {"output_dir": str, "files": list[str], "batches": list[dict], "summary": dict}
        """
        logger.info("=" * 60)
        logger.info("  雲端測試專案產生器")
        logger.info(f"  輸出:   {self.output}")
        logger.info(f"  模組:   {len(self.catalog)} 個")
        logger.info(f"  commit: {'是' if self.spec.commit else '否'}")
        logger.info("=" * 60)

        self.scheduler.validate_schedule(len(self.catalog))
        steps = self.plan()

        self.materializer.ensure_layout()
        if self.spec.commit:
            self._ensure_repository()

        created_files: list[str] = []
        for number, step in enumerate(steps, 1):
            logger.info(f"[{number}/{len(steps)}] {step.batch.message}")
            self.materializer.write_batch(list(step.artifacts))
            for artifact in step.artifacts:
                created_files.append(artifact.path)
                logger.info(f"  ✓ {artifact.path}")
            if self.spec.commit:
                self.scheduler.commit_batch(step.batch)

        summary = {
            "modules": len(self.catalog),
            "total_files": len(created_files),
            "total_commits": len(self.scheduler.history),
        }

        logger.info("=" * 60)
        logger.info("  產生完成！")
        logger.info(f"  目錄:     {self.output}")
        logger.info(f"  檔案數:   {summary['total_files']}")
        logger.info(f"  commit 數: {summary['total_commits']}")
        logger.info("=" * 60)

        return {
            "output_dir": str(self.output),
            "files": created_files,
            "batches": [self.describe(step.batch) for step in steps],
            "summary": summary,
        }

    @staticmethod
    def describe(batch: CommitBatch) -> dict:
        return {
            "message": batch.message,
            "date": format_git_date(batch.author_date),
            "files": list(batch.files),
        }

    def _ensure_repository(self) -> None:
        """
        輸出目錄必須是 repository 的根目錄，且 index 沒有暫存變更。

        位於其他 repository 裡的子目錄視為「不是 repository」，
        --init 時在輸出目錄建立獨立的 repository，不會 commit 到外層。
        """
        if not self.vcs.is_repository():
            if not self.spec.init_repo:
                raise VersionControlError(
                    f"{self.output} 不是 git repository 的根目錄（可加上 --init 自動建立）",
                    context={"output_dir": str(self.output)},
                )
            self.vcs.init_repository()

        if self.vcs.has_staged_changes():
            raise VersionControlError(
                f"{self.output} 的 index 已有暫存變更，請先 commit 或 git reset 後再產生",
                context={"output_dir": str(self.output)},
            )
