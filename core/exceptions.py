"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種失敗都有明確的分類與訊息。
上層可以 catch 大類別 (如 ScaffoldError)，
也可以精準 catch 子類別 (如 GitCommandError)。

所有錯誤都是致命的：產生流程中沒有任何地方 catch 或重試，
第一個錯誤就終止整個執行。

Exception 樹：
    ScaffoldError
    ├── TemplateError
    │   ├── UnknownArtifactKindError
    │   └── InvalidModuleError
    ├── FileWriteError
    ├── VersionControlError
    │   ├── GitNotFoundError
    │   └── GitCommandError
    ├── ScheduleError
    └── ConfigError
        └── ConfigValidationError
"""


class ScaffoldError(Exception):
    """產生器所有例外的基底，catch 這個就能攔截一切產生器錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── 樣板相關 ──

class TemplateError(ScaffoldError):
    """樣板產生錯誤（程式錯誤，執行期無法復原）"""


class UnknownArtifactKindError(TemplateError):
    """要求了不存在的產出物類型"""

    def __init__(self, kind=None):
        super().__init__(f"未知的產出物類型: {kind!r}", context={"kind": kind})


class InvalidModuleError(TemplateError):
    """模組名稱缺少或格式錯誤"""

    def __init__(self, name=None, reason: str = ""):
        msg = f"無效的模組名稱: {name!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"name": name})


# ── 檔案相關 ──

class FileWriteError(ScaffoldError):
    """建立目錄或寫入檔案失敗"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = f"寫入失敗: {path}"
        if original:
            msg += f" ({type(original).__name__}: {original})"
        super().__init__(msg, context={"path": path})


# ── 版本控制相關 ──

class VersionControlError(ScaffoldError):
    """git add / commit 失敗"""


class GitNotFoundError(VersionControlError):
    """找不到 git 執行檔"""

    def __init__(self, executable: str = "git"):
        super().__init__(
            f"找不到 git 執行檔: {executable}",
            context={"executable": executable},
        )


class GitCommandError(VersionControlError):
    """git 指令回傳非 0"""

    def __init__(self, args: list[str] | None = None, returncode: int = 0,
                 stderr: str = ""):
        self.args_list = list(args or [])
        self.returncode = returncode
        self.stderr = stderr
        msg = f"git 指令失敗 (exit {returncode}): {' '.join(self.args_list)}"
        if stderr:
            msg += f"\n{stderr.strip()}"
        super().__init__(
            msg,
            context={"args": self.args_list, "returncode": returncode},
        )


# ── 排程相關 ──

class ScheduleError(ScaffoldError):
    """commit 日期排程違反遞增規則"""


# ── 設定相關 ──

class ConfigError(ScaffoldError):
    """設定相關錯誤"""


class ConfigValidationError(ConfigError):
    """執行設定檔驗證失敗"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        msg = "設定檔驗證失敗:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg, context={"errors": errors})
