"""
資料結構定義
模組、產出物、commit batch 與執行設定的統一格式。

命名規則只在這裡定義一次 (derive_identifiers)，所有樣板都從同一份
Identifiers 取名字，避免不同產出物之間的命名漂移：
    type_form: 模組名稱原樣，用於類別名稱  (VirtualMachine)
    path_form: 全小寫，用於路徑 / selector (virtualmachine)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum

from core.exceptions import InvalidModuleError, ScheduleError


_MODULE_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")

# 預設模組目錄，順序決定 commit 日期偏移
DEFAULT_MODULES = (
    "Dashboard", "VirtualMachine", "Storage", "Network", "Database",
    "Security", "Monitoring", "Billing", "Support", "Settings",
    "UserManagement", "RoleManagement", "AuditLog", "Notifications", "API",
    "Integrations", "Analytics", "Reports", "Compliance", "Backup",
)


class ArtifactKind(Enum):
    PAGE_ABSTRACTION = "page_abstraction"          # Page Object
    BEHAVIOR_TEST = "behavior_test"                # Playwright 測試
    SCENARIO_DESCRIPTION = "scenario_description"  # Cucumber .feature
    SCENARIO_BINDING = "scenario_binding"          # Cucumber step 定義
    SHARED_UTILITY = "shared_utility"              # 共用 helpers
    FIXTURE_DATA = "fixture_data"                  # 測試資料 JSON
    MAINTENANCE_TEST = "maintenance_test"          # VM 維護測試

    @classmethod
    def per_module(cls) -> tuple[ArtifactKind, ...]:
        """每個模組都會產生的四種產出物（依寫入順序）"""
        return (
            cls.PAGE_ABSTRACTION,
            cls.BEHAVIOR_TEST,
            cls.SCENARIO_DESCRIPTION,
            cls.SCENARIO_BINDING,
        )

    @property
    def needs_module(self) -> bool:
        return self in ArtifactKind.per_module()


def validate_module_name(name) -> str:
    """模組名稱必須是英文字母開頭的英數字串（會直接變成類別名稱）"""
    if not isinstance(name, str) or not name:
        raise InvalidModuleError(name, "名稱不可為空")
    if not _MODULE_NAME.match(name):
        raise InvalidModuleError(name, "只能包含英數字且以字母開頭")
    return name


@dataclass(frozen=True)
class Identifiers:
    """從模組名稱衍生的所有識別字"""
    type_form: str                         # "VirtualMachine"
    path_form: str                         # "virtualmachine"

    @property
    def class_name(self) -> str:
        return f"{self.type_form}Page"

    @property
    def variable(self) -> str:
        return f"{self.path_form}Page"

    @property
    def route(self) -> str:
        return f"/{self.path_form}"

    @property
    def selector_prefix(self) -> str:
        return f"#{self.path_form}-"

    def selector(self, suffix: str) -> str:
        return f"{self.selector_prefix}{suffix}"


def derive_identifiers(name: str) -> Identifiers:
    validate_module_name(name)
    return Identifiers(type_form=name, path_form=name.lower())


@dataclass(frozen=True)
class Module:
    """單一模組"""
    name: str

    def __post_init__(self):
        validate_module_name(self.name)

    @property
    def identifiers(self) -> Identifiers:
        return derive_identifiers(self.name)


@dataclass(frozen=True)
class Artifact:
    """單一產出檔案，產生後不再修改"""
    kind: ArtifactKind
    module: Module | None
    path: str                              # 相對輸出根目錄，POSIX 格式
    content: str


@dataclass(frozen=True)
class CommitBatch:
    """
    一次 add + commit 的內容。

    與 git 無關的純值物件；author_date 必須等於 committer_date。
    """
    files: tuple[str, ...]
    message: str
    author_date: datetime
    committer_date: datetime

    def __post_init__(self):
        object.__setattr__(self, "files", tuple(self.files))
        if not self.files:
            raise ScheduleError("commit batch 不可沒有檔案",
                                context={"message": self.message})
        if self.author_date != self.committer_date:
            raise ScheduleError(
                f"author_date 與 committer_date 不一致: "
                f"{self.author_date} != {self.committer_date}",
                context={"message": self.message},
            )

    @classmethod
    def at(cls, files, message: str, when: datetime) -> "CommitBatch":
        return cls(files=tuple(files), message=message,
                   author_date=when, committer_date=when)


@dataclass
class ScaffoldSpec:
    """完整執行設定"""
    output_dir: str = ""
    modules: list[str] = field(default_factory=lambda: list(DEFAULT_MODULES))
    ext: str = "js"
    # 排程
    base_date: date = date(2025, 1, 3)
    utility_date: datetime = datetime(2025, 1, 1, 9, 0, 0)
    data_date: datetime = datetime(2025, 1, 2, 9, 0, 0)
    maintenance_dates: list[date] = field(
        default_factory=lambda: [date(2025, 6, 5), date(2025, 6, 10)]
    )
    module_time: time = time(18, 0, 0)
    maintenance_time: time = time(18, 0, 0)
    day_step: int = 5
    # 行為
    commit: bool = True
    init_repo: bool = False

    def to_dict(self) -> dict:
        """轉為 dict (存檔 / 傳遞用)，日期一律轉 ISO 字串"""
        return {
            "output_dir": self.output_dir,
            "modules": list(self.modules),
            "ext": self.ext,
            "base_date": self.base_date.isoformat(),
            "utility_date": self.utility_date.isoformat(),
            "data_date": self.data_date.isoformat(),
            "maintenance_dates": [d.isoformat() for d in self.maintenance_dates],
            "module_time": self.module_time.isoformat(),
            "maintenance_time": self.maintenance_time.isoformat(),
            "day_step": self.day_step,
            "commit": self.commit,
            "init_repo": self.init_repo,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScaffoldSpec":
        """從 dict 建立（讀取 JSON / YAML 設定檔用），缺少的欄位用預設值"""
        spec = cls()
        if "output_dir" in data:
            spec.output_dir = str(data["output_dir"] or "")
        if "modules" in data:
            spec.modules = list(data["modules"])
        if "ext" in data:
            spec.ext = str(data["ext"])
        if "base_date" in data:
            spec.base_date = date.fromisoformat(str(data["base_date"]))
        if "utility_date" in data:
            spec.utility_date = datetime.fromisoformat(str(data["utility_date"]))
        if "data_date" in data:
            spec.data_date = datetime.fromisoformat(str(data["data_date"]))
        if "maintenance_dates" in data:
            spec.maintenance_dates = [
                date.fromisoformat(str(d)) for d in data["maintenance_dates"]
            ]
        if "module_time" in data:
            spec.module_time = time.fromisoformat(str(data["module_time"]))
        if "maintenance_time" in data:
            spec.maintenance_time = time.fromisoformat(str(data["maintenance_time"]))
        if "day_step" in data:
            spec.day_step = int(data["day_step"])
        if "commit" in data:
            spec.commit = bool(data["commit"])
        if "init_repo" in data:
            spec.init_repo = bool(data["init_repo"])
        return spec
