import pytest
from unittest.mock import AsyncMock, Mock

from dom_queries import LivePage, find_by_text, snapshot, snapshot_async
from dom_queries.core import QueryConfig, QueryTimeoutError


class TestSnapshots:
    """Test parsing Playwright page content"""

    def test_snapshot(self):
        page = Mock(url="https://example.com")
        page.content.return_value = "<h1>Welcome</h1>"

        soup = snapshot(page)
        assert soup.h1.string == "Welcome"

    @pytest.mark.asyncio
    async def test_snapshot_async(self):
        page = Mock(url="https://example.com")
        page.content = AsyncMock(return_value="<h1>Welcome</h1>")

        soup = await snapshot_async(page)
        assert soup.h1.string == "Welcome"


class TestLivePage:
    """Test polling a live page"""

    @pytest.mark.asyncio
    async def test_content_rendered_while_waiting(self):
        page = Mock(url="https://example.com")
        page.content = AsyncMock(side_effect=[
            "<p>Loading</p>",
            "<p>Loading</p>",
            "<p>Saved</p>",
        ])

        element = await find_by_text(LivePage(page), "Saved", timeout=1000, interval=1)

        assert element.name == "p"
        assert page.content.await_count == 3

    @pytest.mark.asyncio
    async def test_timeout_reports_last_snapshot(self):
        page = Mock(url="https://example.com")
        page.content = AsyncMock(return_value="<p>Loading</p>")
        config = QueryConfig(async_util_timeout=20, async_util_interval=5)

        with pytest.raises(QueryTimeoutError) as exc_info:
            await find_by_text(LivePage(page), "Saved", config=config)

        assert exc_info.value.container.p.string == "Loading"
        assert "Loading" in str(exc_info.value)
