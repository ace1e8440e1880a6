from __future__ import annotations

import io
from collections.abc import Callable, Generator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

import resume_builder.data.db as app_db
from resume_builder.constants.layout_constants import MARGIN, PAGE_HEIGHT, PAGE_WIDTH
from resume_builder.data.db import init_db
from resume_builder.layout.cursor import PageCursor
from resume_builder.layout.metrics import TextMetrics
from resume_builder.layout.painter import PdfPainter


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    """Use a temporary SQLite DB for API and storage tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_db()
    init_db()
    yield
    # Dispose engine to release connections
    app_db.reset_db()


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add api_db fixture to tests that touch the database."""
    for item in items:
        stem = Path(str(item.fspath)).stem.lower()
        if "api" in stem or "store" in stem:
            item.add_marker(pytest.mark.usefixtures("api_db"))


# ---------------------------------------------------------------------------
# Layout helpers


@dataclass(frozen=True)
class DrawnString:
    """One drawString call, with its position converted to layout millimetres."""

    text: str
    x: float
    y: float
    font: str
    size: float
    page: int


class RecordingCanvas(Canvas):
    """reportlab canvas that remembers what was drawn."""

    instances: list[RecordingCanvas] = []

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.strings: list[DrawnString] = []
        self.links: list[tuple[str, tuple[float, float, float, float]]] = []
        self.images: list[tuple[float, float, float, float]] = []
        RecordingCanvas.instances.append(self)

    def drawString(self, x: float, y: float, text: str, *args: Any, **kwargs: Any) -> Any:
        self.strings.append(
            DrawnString(
                text=text,
                x=x / mm,
                y=PAGE_HEIGHT - y / mm,
                font=self._fontname,
                size=self._fontsize,
                page=self.getPageNumber(),
            )
        )
        return super().drawString(x, y, text, *args, **kwargs)

    def linkURL(self, url: str, rect: Any, *args: Any, **kwargs: Any) -> Any:
        self.links.append((url, rect))
        return super().linkURL(url, rect, *args, **kwargs)

    def drawImage(
        self, image: Any, x: float, y: float, width: float, height: float, **kwargs: Any
    ) -> Any:
        # (left, top, width, height) in layout millimetres
        self.images.append((x / mm, PAGE_HEIGHT - (y + height) / mm, width / mm, height / mm))
        return super().drawImage(image, x, y, width, height, **kwargs)

    def texts(self) -> list[str]:
        return [item.text for item in self.strings]

    def find(self, text: str) -> DrawnString:
        return next(item for item in self.strings if item.text == text)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas(io.BytesIO(), pagesize=(PAGE_WIDTH * mm, PAGE_HEIGHT * mm))


@pytest.fixture
def make_painter(canvas: RecordingCanvas) -> Callable[..., PdfPainter]:
    """Build a painter on the recording canvas, optionally starting at *start_y*."""

    def _make(start_y: float = MARGIN) -> PdfPainter:
        cursor = PageCursor(start_y, on_new_page=canvas.showPage)
        return PdfPainter(canvas, cursor, TextMetrics())

    return _make
