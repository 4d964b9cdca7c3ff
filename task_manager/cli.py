"""Command-line entry point: ``task-manager report`` or ``task-manager serve``."""
import argparse
import logging
from typing import List, Optional

from . import config
from .logging_setup import setup_logging
from .report import run_task_management

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="task-manager", description="In-memory task manager")
    sub = parser.add_subparsers(dest="command")

    report = sub.add_parser("report", help="print statistics for a tasks file")
    report.add_argument("path", nargs="?", default=config.TASKS_FILE)
    report.add_argument("--keyword", default=config.SEARCH_KEYWORD)

    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(console_level=config.LOG_LEVEL, log_dir=config.LOG_DIR)

    if args.command == "serve":
        import uvicorn

        logger.info("Serving tasks from %s on %s:%d", config.TASKS_FILE, args.host, args.port)
        uvicorn.run("task_manager.main:app", host=args.host, port=args.port)
        return 0

    path = getattr(args, "path", config.TASKS_FILE)
    keyword = getattr(args, "keyword", config.SEARCH_KEYWORD)
    run_task_management(path, keyword=keyword)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
