"""
專案目錄結構

所有產出物的標準路徑都由這裡決定（相對於輸出根目錄）：

    <output>/
    ├── src/
    │   ├── pages/        <ModuleName>Page.<ext>
    │   └── utils/        helpers.<ext>
    ├── tests/            <modulename>.test.<ext>, vm_update<n>.test.<ext>
    │   └── steps/        <modulename>.steps.<ext>
    ├── features/         <modulename>.feature
    └── data/             test-data.json
"""

from __future__ import annotations

from pathlib import PurePosixPath

from core.exceptions import InvalidModuleError, UnknownArtifactKindError
from scaffold.schema import ArtifactKind, Identifiers

SRC_DIR = PurePosixPath("src")
PAGES_DIR = SRC_DIR / "pages"
UTILS_DIR = SRC_DIR / "utils"
TESTS_DIR = PurePosixPath("tests")
STEPS_DIR = TESTS_DIR / "steps"
FEATURES_DIR = PurePosixPath("features")
DATA_DIR = PurePosixPath("data")

# 建立順序：父目錄在前
CANONICAL_DIRS = (
    SRC_DIR, PAGES_DIR, TESTS_DIR, UTILS_DIR, FEATURES_DIR, STEPS_DIR, DATA_DIR,
)

_DIR_BY_KIND = {
    ArtifactKind.PAGE_ABSTRACTION: PAGES_DIR,
    ArtifactKind.BEHAVIOR_TEST: TESTS_DIR,
    ArtifactKind.SCENARIO_DESCRIPTION: FEATURES_DIR,
    ArtifactKind.SCENARIO_BINDING: STEPS_DIR,
    ArtifactKind.SHARED_UTILITY: UTILS_DIR,
    ArtifactKind.FIXTURE_DATA: DATA_DIR,
    ArtifactKind.MAINTENANCE_TEST: TESTS_DIR,
}


class ProjectLayout:
    """產出物類型 → 標準路徑"""

    def __init__(self, ext: str = "js"):
        self.ext = ext

    def directory_for(self, kind: ArtifactKind) -> PurePosixPath:
        try:
            return _DIR_BY_KIND[kind]
        except (KeyError, TypeError):
            raise UnknownArtifactKindError(kind) from None

    def filename_for(self, kind: ArtifactKind, ids: Identifiers | None = None,
                     sequence: int = 1) -> str:
        self.directory_for(kind)
        if kind.needs_module and ids is None:
            raise InvalidModuleError(None, f"{kind.value} 需要模組名稱")

        ext = self.ext
        if kind == ArtifactKind.PAGE_ABSTRACTION:
            return f"{ids.type_form}Page.{ext}"
        if kind == ArtifactKind.BEHAVIOR_TEST:
            return f"{ids.path_form}.test.{ext}"
        if kind == ArtifactKind.SCENARIO_DESCRIPTION:
            return f"{ids.path_form}.feature"
        if kind == ArtifactKind.SCENARIO_BINDING:
            return f"{ids.path_form}.steps.{ext}"
        if kind == ArtifactKind.SHARED_UTILITY:
            return f"helpers.{ext}"
        if kind == ArtifactKind.FIXTURE_DATA:
            return "test-data.json"
        return f"vm_update{sequence}.test.{ext}"

    def path_for(self, kind: ArtifactKind, ids: Identifiers | None = None,
                 sequence: int = 1) -> str:
        """相對輸出根目錄的 POSIX 路徑"""
        return str(self.directory_for(kind) / self.filename_for(kind, ids, sequence))
