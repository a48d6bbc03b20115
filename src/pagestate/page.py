"""
Editable HTML page: the source of region handles.
"""

import logging
from pathlib import Path
from typing import List

from bs4 import BeautifulSoup

from .types.region import SoupRegion

DEFAULT_EDITABLE_SELECTOR = '[contenteditable="true"]'


class EditablePage:
    """Parsed HTML page exposing its editable regions in document order."""

    def __init__(self, html: str, selector: str = DEFAULT_EDITABLE_SELECTOR):
        self.selector = selector
        self.soup = BeautifulSoup(html, "html.parser")
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_file(cls, path: str, selector: str = DEFAULT_EDITABLE_SELECTOR) -> "EditablePage":
        return cls(Path(path).read_text(encoding="utf-8"), selector=selector)

    def regions(self) -> List[SoupRegion]:
        """
        Region handles for every editable element.

        Handles wrap the live parse tree, so edits made through them show up
        in ``render()``.
        """
        regions = [SoupRegion(tag) for tag in self.soup.select(self.selector)]
        if not regions:
            self.logger.warning("No editable elements found on the page")
        return regions

    def render(self) -> str:
        return self.soup.decode()

    def write(self, path: str) -> None:
        Path(path).write_text(self.render(), encoding="utf-8")
