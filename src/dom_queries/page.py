"""
Playwright adapter: query a rendered page through a BeautifulSoup snapshot.

Example:
    with sync_playwright() as p:
        page = p.chromium.launch().new_page()
        page.goto(url)
        get_by_label_text(snapshot(page), "Email")

    # re-snapshots the page on every poll
    await find_by_text(LivePage(async_page), "Saved")
"""

import logging

from bs4 import BeautifulSoup
from playwright.sync_api import Page as SyncPage
from playwright.async_api import Page as AsyncPage

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "html.parser"


def snapshot(page: SyncPage, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse the current content of a sync Playwright page"""
    logger.debug(f"Snapshotting page: {page.url}")
    return BeautifulSoup(page.content(), parser)


async def snapshot_async(page: AsyncPage, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse the current content of an async Playwright page"""
    logger.debug(f"Snapshotting page: {page.url}")
    return BeautifulSoup(await page.content(), parser)


class LivePage:
    """
    Container for ``find_*`` queries that follows a live async page.

    Every poll takes a fresh snapshot, so content rendered while waiting is
    seen by the next attempt.
    """

    def __init__(self, page: AsyncPage, parser: str = DEFAULT_PARSER):
        self.page = page
        self.parser = parser

    async def snapshot(self) -> BeautifulSoup:
        return await snapshot_async(self.page, self.parser)

    def __repr__(self) -> str:
        return f"LivePage({self.page.url!r})"
