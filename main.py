"""Main entry point for PanelForge"""

import asyncio
import argparse
import sys
from pathlib import Path

import structlog

from config import settings
from core.exceptions import PanelForgeError
from utils.logging import setup_logging

logger = structlog.get_logger(__name__)


def serve_cli(argv):
    parser = argparse.ArgumentParser(
        prog="main.py serve",
        description="Run the PanelForge upload API"
    )
    parser.add_argument("--host", default=settings.HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    from web.main import serve
    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    # Check if serve command
    if argv and argv[0] == "serve":
        return serve_cli(argv[1:])

    parser = argparse.ArgumentParser(
        description="PanelForge - spreadsheet to React admin generator",
        epilog="Use 'python main.py serve --help' to run the upload API"
    )
    parser.add_argument("file", type=Path, help="Model workbook (.xlsx/.xlsm)")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(settings.FRONTEND_DIR),
        help="Frontend root the generated files are written to"
    )
    parser.add_argument(
        "--scaffold",
        action="store_true",
        default=settings.SCAFFOLD_ENABLED,
        help="Create and configure the Vite/Tailwind/shadcn project first"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and render without writing; list the files"
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.file.exists():
        print(f"Error: File not found: {args.file}")
        return 1

    from orchestrator import Orchestrator
    from ui.progress import ConsoleProgress

    orchestrator = Orchestrator(
        progress=ConsoleProgress(),
        output_dir=args.output_dir,
        scaffold=args.scaffold,
        dry_run=args.dry_run,
    )

    try:
        ctx = asyncio.run(orchestrator.run(str(args.file)))
    except PanelForgeError as e:
        logger.debug("Pipeline failed", exc_info=True)
        print(f"\n✗ Pipeline failed: {e}")
        return 1

    print(f"\n✓ Models: {', '.join(ctx.models)}")
    if args.dry_run:
        for path in sorted(ctx.generated_project.files):
            print(f"  {path}")
        print(f"  ({len(ctx.generated_project.files)} files, not written)")
    else:
        print(f"  Wrote {len(ctx.write.written_files)} files to {ctx.write.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
