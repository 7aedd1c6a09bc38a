"""
scaffold/__main__.py 單元測試
"""

import json

import pytest

from core.exceptions import ConfigError, ConfigValidationError
from scaffold.__main__ import build_parser, build_spec, main
from utils.logger import logger


def _spec(*argv):
    return build_spec(build_parser().parse_args(list(argv)))


@pytest.mark.unit
class TestBuildSpec:
    """命令列 → ScaffoldSpec"""

    @pytest.mark.unit
    def test_modules_override(self, tmp_path):
        spec = _spec("--output", str(tmp_path), "--modules", "Dashboard, Storage,,")
        assert spec.modules == ["Dashboard", "Storage"]
        assert spec.output_dir == str(tmp_path)

    @pytest.mark.unit
    def test_flags(self, tmp_path):
        spec = _spec("--output", str(tmp_path), "--init", "--no-commit", "--ext", "ts",
                     "--base-date", "2025-02-01")
        assert spec.init_repo is True
        assert spec.commit is False
        assert spec.ext == "ts"
        assert spec.base_date.isoformat() == "2025-02-01"

    @pytest.mark.unit
    def test_bad_base_date(self):
        with pytest.raises(ConfigError):
            _spec("--base-date", "01/02/2025")

    @pytest.mark.unit
    def test_bad_ext(self):
        with pytest.raises(ConfigValidationError):
            _spec("--ext", ".js")

    @pytest.mark.unit
    def test_spec_file_then_override(self, tmp_path):
        path = tmp_path / "scaffold.yaml"
        path.write_text("output_dir: ./from-file\nmodules: [Network]\n", encoding="utf-8")
        spec = _spec("--spec", str(path), "--output", str(tmp_path / "cli"))
        assert spec.modules == ["Network"]
        assert spec.output_dir == str(tmp_path / "cli")

    @pytest.mark.unit
    def test_catalog_file(self, tmp_path):
        path = tmp_path / "modules.json"
        path.write_text(json.dumps(["Backup", "Reports"]), encoding="utf-8")
        assert _spec("--catalog", str(path)).modules == ["Backup", "Reports"]


@pytest.mark.unit
class TestMain:
    """CLI 入口"""

    @pytest.mark.unit
    def test_example(self, capsys):
        assert main(["--example"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["base_date"] == "2025-01-03"
        assert len(data["modules"]) == 20

    @pytest.mark.unit
    def test_dry_run_prints_plan(self, capsys, output_dir):
        code = main(["--dry-run", "--output", str(output_dir),
                     "--modules", "Dashboard,Storage"])
        out = capsys.readouterr().out
        assert code == 0
        assert "2025-01-01T09:00:00  Add utility helpers for login and test data" in out
        assert "2025-01-08T18:00:00  Add Storage page, tests, and Cucumber features" in out
        assert "    tests/steps/storage.steps.js" in out
        assert not output_dir.exists()

    @pytest.mark.unit
    def test_no_commit_writes_files(self, capsys, output_dir):
        code = main(["--no-commit", "--output", str(output_dir), "--modules", "Storage"])
        assert code == 0
        assert "共產生 8 個檔案，0 個 commit。" in capsys.readouterr().out
        assert (output_dir / "src/pages/StoragePage.js").is_file()

    @pytest.mark.unit
    @pytest.mark.parametrize("argv", [
        ["--modules", "bad-name", "--no-commit"],
        ["--base-date", "2025-13-01", "--dry-run"],
        ["--spec", "does-not-exist.yaml"],
    ])
    def test_errors_exit_1(self, argv, output_dir):
        assert main([*argv, "--output", str(output_dir)]) == 1

    @pytest.mark.unit
    def test_huge_day_step_exit_1(self, tmp_path, output_dir):
        path = tmp_path / "scaffold.json"
        path.write_text(json.dumps({"day_step": 10**9}), encoding="utf-8")
        assert main(["--spec", str(path), "--output", str(output_dir)]) == 1
        assert not output_dir.exists()


@pytest.mark.unit
class TestLogFile:
    """--log-file / --log-json"""

    @pytest.mark.unit
    def test_error_written_as_json(self, tmp_path, output_dir):
        log_file = tmp_path / "logs" / "run.log"
        code = main(["--modules", "bad-name", "--no-commit",
                     "--output", str(output_dir),
                     "--log-file", str(log_file), "--log-json"])
        assert code == 1

        assert "產生中止" in log_file.read_text(encoding="utf-8")
        lines = (tmp_path / "logs" / "run.json.log").read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["level"] == "ERROR"
        assert entry["logger"] == "cloud_scaffold"
        assert entry["context"] == {"name": "bad-name"}

    @pytest.mark.unit
    def test_handlers_removed_after_run(self, tmp_path, output_dir):
        before = list(logger.handlers)
        main(["--dry-run", "--output", str(output_dir),
              "--log-file", str(tmp_path / "run.log")])
        assert logger.handlers == before
        assert not (tmp_path / "run.json.log").exists()
