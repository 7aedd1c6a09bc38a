"""
Commit Scheduler
計算每個 commit batch 的日期，並依序交給版本控制執行 add + commit。

日期規則（預設值）：
    共用 helpers      2025-01-01T09:00:00
    測試資料          2025-01-02T09:00:00
    第 i 個模組       base_date + i * 5 天，時間 18:00:00 (base_date = 2025-01-03)
    VM 維護測試       2025-06-05T18:00:00, 2025-06-10T18:00:00

整個序列必須嚴格遞增；batch 一律照順序送出，不重排、不平行、不重試。
commit 失敗時，該 batch 已 stage 的變更會留在 working tree（不清理）。
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from core.exceptions import ScheduleError
from scaffold.schema import CommitBatch, ScaffoldSpec
from scaffold.vcs import VersionControl, format_git_date
from utils.logger import logger

UTILITY_MESSAGE = "Add utility helpers for login and test data"
DATA_MESSAGE = "Add test data for cloud resources"
SCENARIO_FRAMEWORK = "Cucumber"


def module_message(module_name: str) -> str:
    return f"Add {module_name} page, tests, and {SCENARIO_FRAMEWORK} features"


def maintenance_message(when: datetime) -> str:
    return f"Add VM maintenance test {when.date().isoformat()}"


class CommitScheduler:
    """commit 日期排程 + 依序提交"""

    def __init__(
        self,
        vcs: VersionControl,
        *,
        base_date: date = date(2025, 1, 3),
        utility_date: datetime = datetime(2025, 1, 1, 9, 0, 0),
        data_date: datetime = datetime(2025, 1, 2, 9, 0, 0),
        maintenance_dates: list[date] | None = None,
        module_time: time = time(18, 0, 0),
        maintenance_time: time = time(18, 0, 0),
        day_step: int = 5,
    ):
        if day_step < 1:
            raise ScheduleError(f"day_step 必須 >= 1: {day_step}")
        self.vcs = vcs
        self.base_date = base_date
        self._utility_date = utility_date
        self._data_date = data_date
        self._maintenance_days = list(
            maintenance_dates if maintenance_dates is not None
            else [date(2025, 6, 5), date(2025, 6, 10)]
        )
        self.module_time = module_time
        self.maintenance_time = maintenance_time
        self.day_step = day_step
        self.history: list[CommitBatch] = []

    @classmethod
    def from_spec(cls, spec: ScaffoldSpec, vcs: VersionControl) -> "CommitScheduler":
        return cls(
            vcs,
            base_date=spec.base_date,
            utility_date=spec.utility_date,
            data_date=spec.data_date,
            maintenance_dates=spec.maintenance_dates,
            module_time=spec.module_time,
            maintenance_time=spec.maintenance_time,
            day_step=spec.day_step,
        )

    # ── 日期計算 ──

    def utility_date(self) -> datetime:
        return self._utility_date

    def data_date(self) -> datetime:
        return self._data_date

    def module_date(self, index: int) -> datetime:
        """第 index 個模組（0 起算）的 commit 日期"""
        if index < 0:
            raise ScheduleError(f"模組索引不可為負數: {index}")
        try:
            day = self.base_date + timedelta(days=self.day_step * index)
        except OverflowError:
            raise ScheduleError(
                f"第 {index} 個模組的日期超出可表示範圍 (day_step={self.day_step})",
                context={"index": index, "day_step": self.day_step,
                         "base_date": self.base_date.isoformat()},
            ) from None
        return datetime.combine(day, self.module_time)

    def maintenance_dates(self) -> list[datetime]:
        return [datetime.combine(d, self.maintenance_time)
                for d in self._maintenance_days]

    def schedule(self, module_count: int) -> list[datetime]:
        """完整日期序列: helpers, data, 模組 0..n-1, 維護測試"""
        dates = [self.utility_date(), self.data_date()]
        dates.extend(self.module_date(i) for i in range(module_count))
        dates.extend(self.maintenance_dates())
        return dates

    def validate_schedule(self, module_count: int) -> list[datetime]:
        """
        確認整個序列嚴格遞增，在寫入任何檔案前呼叫。

        Raises:
            ScheduleError: 例如模組太多，日期超過維護測試日期
        """
        dates = self.schedule(module_count)
        for earlier, later in zip(dates, dates[1:]):
            if later <= earlier:
                raise ScheduleError(
                    f"commit 日期未嚴格遞增: {format_git_date(earlier)} "
                    f"→ {format_git_date(later)}",
                    context={"module_count": module_count},
                )
        return dates

    # ── Batch 建立 ──

    def utility_batch(self, files: list[str]) -> CommitBatch:
        return CommitBatch.at(files, UTILITY_MESSAGE, self.utility_date())

    def data_batch(self, files: list[str]) -> CommitBatch:
        return CommitBatch.at(files, DATA_MESSAGE, self.data_date())

    def module_batch(self, index: int, module_name: str,
                     files: list[str]) -> CommitBatch:
        return CommitBatch.at(files, module_message(module_name),
                              self.module_date(index))

    def maintenance_batch(self, sequence: int, files: list[str]) -> CommitBatch:
        """sequence 從 1 開始"""
        dates = self.maintenance_dates()
        if not 1 <= sequence <= len(dates):
            raise ScheduleError(
                f"維護測試序號超出範圍: {sequence} (共 {len(dates)} 個日期)"
            )
        when = dates[sequence - 1]
        return CommitBatch.at(files, maintenance_message(when), when)

    # ── 執行 ──

    def commit_batch(self, batch: CommitBatch) -> None:
        """
        stage batch 的檔案，再以 batch 的日期提交。

        Raises:
            ScheduleError: 日期沒有晚於上一個 batch
            VersionControlError: git add / commit 失敗
        """
        if self.history and batch.author_date <= self.history[-1].author_date:
            raise ScheduleError(
                f"batch 日期 {format_git_date(batch.author_date)} 未晚於上一個 "
                f"{format_git_date(self.history[-1].author_date)}",
                context={"message": batch.message},
            )

        self.vcs.stage(list(batch.files))
        self.vcs.commit(batch.message, batch.author_date, batch.committer_date)
        self.history.append(batch)
        logger.info(
            f"  ✓ commit [{format_git_date(batch.author_date)}] {batch.message}"
        )
