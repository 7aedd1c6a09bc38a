"""
Template Registry
產出物類型 + 模組名稱 → 檔案內容 / Artifact。

所有 render 都是純函式：相同輸入永遠得到逐位元相同的文字，
不碰檔案系統也不碰 git。

用法：
    registry = TemplateRegistry()
    text = registry.render_artifact(ArtifactKind.PAGE_ABSTRACTION, "Storage")
    artifacts = registry.build_module_artifacts(Module("Storage"))
"""

from __future__ import annotations

from core.exceptions import TemplateError, UnknownArtifactKindError
from scaffold.feature_writer import FeatureWriter
from scaffold.layout import ProjectLayout
from scaffold.page_writer import PageWriter
from scaffold.schema import Artifact, ArtifactKind, Module, derive_identifiers
from scaffold.support_writer import SupportWriter
from scaffold.test_writer import TestWriter


def _coerce_kind(kind) -> ArtifactKind:
    """接受 ArtifactKind 或其字串值，其他一律視為未知類型"""
    if isinstance(kind, ArtifactKind):
        return kind
    try:
        return ArtifactKind(kind)
    except (ValueError, TypeError):
        raise UnknownArtifactKindError(kind) from None


class TemplateRegistry:
    """樣板註冊表"""

    def __init__(self, layout: ProjectLayout | None = None):
        self.layout = layout or ProjectLayout()
        self._pages = PageWriter()
        self._tests = TestWriter()
        self._features = FeatureWriter()
        self._support = SupportWriter()

    def render_artifact(self, kind, module_name: str | None = None, *,
                        sequence: int = 1) -> str:
        """
        產生單一產出物內容。

        Args:
            kind: ArtifactKind（或其字串值）
            module_name: 每模組產出物必填；共用產出物忽略
            sequence: 維護測試序號（從 1 開始）

        Raises:
            UnknownArtifactKindError: 類型不存在
            InvalidModuleError: 缺少或錯誤的模組名稱
        """
        kind = _coerce_kind(kind)

        if kind.needs_module:
            ids = derive_identifiers(module_name)
            if kind == ArtifactKind.PAGE_ABSTRACTION:
                return self._pages.render(ids)
            if kind == ArtifactKind.BEHAVIOR_TEST:
                return self._tests.render(ids)
            if kind == ArtifactKind.SCENARIO_DESCRIPTION:
                return self._features.render_feature(ids)
            return self._features.render_steps(ids)

        if kind == ArtifactKind.SHARED_UTILITY:
            return self._support.render_helpers()
        if kind == ArtifactKind.FIXTURE_DATA:
            return self._support.render_fixture_data()

        if sequence < 1:
            raise TemplateError(f"維護測試序號必須 >= 1: {sequence}",
                                context={"sequence": sequence})
        return self._tests.render_maintenance(sequence)

    def build_artifact(self, kind, module: Module | None = None, *,
                       sequence: int = 1) -> Artifact:
        """內容 + 標準路徑"""
        kind = _coerce_kind(kind)
        name = module.name if module is not None else None
        content = self.render_artifact(kind, name, sequence=sequence)
        ids = module.identifiers if (module is not None and kind.needs_module) else None
        path = self.layout.path_for(kind, ids, sequence=sequence)
        return Artifact(
            kind=kind,
            module=module if kind.needs_module else None,
            path=path,
            content=content,
        )

    def build_module_artifacts(self, module: Module) -> list[Artifact]:
        """單一模組的四個產出物，順序: page, test, feature, steps"""
        return [self.build_artifact(kind, module) for kind in ArtifactKind.per_module()]


_default_registry = TemplateRegistry()


def render_artifact(kind, module_name: str | None = None, *, sequence: int = 1) -> str:
    """使用預設 registry (副檔名 js) 產生內容"""
    return _default_registry.render_artifact(kind, module_name, sequence=sequence)
