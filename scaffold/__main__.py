"""
CLI 入口

用法:
    # 以預設 20 個模組產生，並在輸出目錄建立 git repository
    python -m scaffold --output ./cloud_tests --init

    # 從 JSON / YAML 設定檔產生
    python -m scaffold --spec scaffold.yaml

    # 只產生部分模組、自訂起始日期
    python -m scaffold --output ./demo --modules Dashboard,VirtualMachine,Storage \\
        --base-date 2025-01-03 --init

    # 只預覽 commit 排程，不寫檔也不呼叫 git
    python -m scaffold --dry-run

    # 同時寫純文字與 JSON 日誌檔
    python -m scaffold --init --log-file reports/scaffold.log --log-json

    # 印出範例設定檔
    python -m scaffold --example > scaffold.json
"""

import argparse
import json
import sys
from datetime import date

from config.config import Config
from core.exceptions import ConfigError, ScaffoldError
from scaffold.catalog import load_catalog
from scaffold.engine import ScaffoldEngine
from scaffold.schema import ScaffoldSpec
from scaffold.vcs import DryRunVersionControl
from utils.logger import attach_file_handlers, detach_handlers, logger


EXAMPLE_SPEC = ScaffoldSpec(output_dir="./cloud_tests").to_dict()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloud-scaffold",
        description="雲端測試專案產生器（Playwright + Cucumber，含模擬 git 歷史）",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
範例:
  python -m scaffold --output ./cloud_tests --init   # 產生 + commit
  python -m scaffold --spec scaffold.yaml            # 從設定檔
  python -m scaffold --dry-run                       # 只預覽排程
  python -m scaffold --example                       # 印出範例設定
""",
    )
    parser.add_argument("--spec", help="JSON / YAML 設定檔路徑")
    parser.add_argument("--output", help="覆蓋輸出目錄")
    parser.add_argument("--catalog", help="JSON / YAML 模組目錄檔")
    parser.add_argument("--modules", help="以逗號分隔的模組名稱（覆蓋目錄）")
    parser.add_argument("--base-date", help="第一個模組的 commit 日期 (YYYY-MM-DD)")
    parser.add_argument("--ext", help="產出檔副檔名 (預設 js)")
    parser.add_argument(
        "--init", action="store_true",
        help="輸出目錄不是 git repository 時自動 git init",
    )
    parser.add_argument(
        "--no-commit", action="store_true",
        help="只寫檔，不呼叫 git",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="只印出 commit 排程，不寫檔也不呼叫 git",
    )
    parser.add_argument(
        "--example", action="store_true",
        help="印出範例 JSON 設定檔",
    )
    parser.add_argument("--log-file", help="額外把日誌寫入此檔案")
    parser.add_argument(
        "--log-json", action="store_true",
        help="搭配 --log-file，另外寫一份 <檔名>.json.log（JSON 結構化）",
    )
    return parser


def build_spec(args: argparse.Namespace) -> ScaffoldSpec:
    """設定檔 → 環境變數預設 → 命令列參數，後者覆蓋前者"""
    if args.spec:
        spec = ScaffoldSpec.from_dict(Config.load_spec(args.spec))
    else:
        spec = ScaffoldSpec(ext=Config.FILE_EXT)

    if args.output:
        spec.output_dir = args.output
    if not spec.output_dir:
        spec.output_dir = Config.OUTPUT_DIR

    if args.catalog:
        spec.modules = [m.name for m in load_catalog(args.catalog)]
    if args.modules:
        spec.modules = [m.strip() for m in args.modules.split(",") if m.strip()]

    if args.base_date:
        try:
            spec.base_date = date.fromisoformat(args.base_date)
        except ValueError:
            raise ConfigError(
                f"--base-date 格式錯誤，應為 YYYY-MM-DD: {args.base_date}"
            ) from None
    if args.ext:
        Config.validate_spec({"ext": args.ext})
        spec.ext = args.ext
    if args.init:
        spec.init_repo = True
    if args.no_commit:
        spec.commit = False
    return spec


def print_plan(engine: ScaffoldEngine) -> None:
    engine.scheduler.validate_schedule(len(engine.catalog))
    for step in engine.plan():
        info = engine.describe(step.batch)
        print(f"{info['date']}  {info['message']}")
        for path in info["files"]:
            print(f"    {path}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # 印範例
    if args.example:
        print(json.dumps(EXAMPLE_SPEC, indent=4, ensure_ascii=False))
        return 0

    handlers = []
    if args.log_file:
        handlers = attach_file_handlers(logger, args.log_file, json_log=args.log_json)
    try:
        return _run(args)
    finally:
        detach_handlers(logger, handlers)


def _run(args: argparse.Namespace) -> int:
    try:
        spec = build_spec(args)
        if args.dry_run:
            print_plan(ScaffoldEngine(spec, vcs=DryRunVersionControl()))
            return 0
        result = ScaffoldEngine(spec).generate()
    except ScaffoldError as e:
        logger.error(f"產生中止: {e}", extra={"context": e.context})
        return 1

    print(f"共產生 {result['summary']['total_files']} 個檔案，"
          f"{result['summary']['total_commits']} 個 commit。")
    return 0


if __name__ == "__main__":
    sys.exit(main())
