"""Paginated A4 resume PDFs from structured resume data."""

from collections.abc import Sequence

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``resume-builder`` command line.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    from resume_builder.cli import main as cli_main

    return cli_main(argv)
