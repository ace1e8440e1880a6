"""Command-line entry point for rendering resumes and serving the API."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from resume_builder.services.resume_data import ResumeData
from resume_builder.services.resume_generator import (
    ResumeGenerationError,
    generate_resume,
    save_resume_document,
)
from resume_builder.services.resume_store import ResumeNotFoundError, load_resume_data

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    parser = argparse.ArgumentParser(
        prog="resume-builder",
        description="Render A4 resume PDFs and run the resume builder API.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", parents=[common], help="Render a resume to PDF.")
    source = render.add_mutually_exclusive_group(required=True)
    source.add_argument("input", nargs="?", type=Path, help="Resume JSON file.")
    source.add_argument("--id", dest="resume_id", help="Render a stored resume by id.")
    render.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory the PDF is written to (default: current directory).",
    )
    render.add_argument("--filename", help="Override the output file name.")

    serve = subparsers.add_parser("serve", parents=[common], help="Start the HTTP API.")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes.")
    return parser


def load_resume_file(path: Path) -> ResumeData:
    """Read a resume snapshot from a JSON file in the web client's shape."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return ResumeData.model_validate(payload)


def _render(args: argparse.Namespace) -> int:
    try:
        if args.resume_id:
            resume = load_resume_data(args.resume_id)
        else:
            resume = load_resume_file(args.input)
    except ResumeNotFoundError as exc:
        print(f"Error: {exc}")
        return 1
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"Error: could not read resume data: {exc}")
        return 1

    try:
        document = asyncio.run(generate_resume(resume, filename=args.filename))
    except ResumeGenerationError as exc:
        print(f"Error: {exc}")
        return 1

    path = save_resume_document(document, args.output_dir)
    print(f"Saved {path} ({document.page_count} page(s))")
    return 0


def _serve(args: argparse.Namespace) -> int:
    from resume_builder.api.main import main as serve_api

    serve_api(host=args.host, port=args.port, reload=args.reload)
    return 0


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv* and dispatch to the chosen command.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "render":
        return _render(args)
    return _serve(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")
        return 130
    except Exception as exc:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
