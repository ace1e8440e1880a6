"""Vertical write position and page accounting for one document."""

from __future__ import annotations

import logging
from collections.abc import Callable

from resume_builder.constants.layout_constants import MARGIN, PAGE_HEIGHT

logger = logging.getLogger(__name__)

__all__ = ["PageCursor"]


class PageCursor:
    """Track the current ``y`` position and start new pages on overflow.

    One instance belongs to exactly one document being generated. *on_new_page*
    is invoked every time a page break happens, before ``y`` is reset, so the
    owner can finish the current page on its canvas.
    """

    def __init__(
        self,
        start_y: float = MARGIN,
        *,
        page_height: float = PAGE_HEIGHT,
        top_margin: float = MARGIN,
        bottom_margin: float = MARGIN,
        on_new_page: Callable[[], None] | None = None,
    ) -> None:
        self.y = start_y
        self.page = 1
        self.page_height = page_height
        self.top_margin = top_margin
        self.bottom_margin = bottom_margin
        self._on_new_page = on_new_page

    @property
    def limit(self) -> float:
        """Lowest ``y`` content may reach on a page."""
        return self.page_height - self.bottom_margin

    @property
    def remaining(self) -> float:
        return self.limit - self.y

    def new_page(self) -> None:
        if self._on_new_page is not None:
            self._on_new_page()
        self.page += 1
        self.y = self.top_margin
        logger.debug("Started page %d", self.page)

    def ensure_space(self, required: float) -> bool:
        """Break to a new page unless *required* fits below ``y``.

        A page that has nothing on it yet is never broken again, even when
        *required* is taller than the printable area.

        Returns:
            ``True`` if a page break happened.
        """
        if self.y + required > self.limit and self.y > self.top_margin:
            self.new_page()
            return True
        return False

    def advance(self, amount: float) -> float:
        self.y += amount
        return self.y

    def add_top_spacing(self, gap: float) -> float:
        """Reserve and consume *gap* before a section header."""
        self.ensure_space(gap)
        return self.advance(gap)
