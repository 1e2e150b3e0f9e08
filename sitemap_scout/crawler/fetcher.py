# sitemap_scout/crawler/fetcher.py
"""
Fetcher module: single HTTP GET with a random browser User-Agent and a fixed timeout.

Every transport problem is turned into ``None`` so callers treat
"fetch failed" and "no data" the same way.
"""
from __future__ import annotations

import asyncio
import random
from typing import TYPE_CHECKING, Optional, Sequence

from aiohttp import ClientError, ClientSession, ClientTimeout

from sitemap_scout.crawler.models import FetchResponse
from sitemap_scout.logger import logger

if TYPE_CHECKING:
    from sitemap_scout.config import ScraperConfig

DEFAULT_TIMEOUT: float = 10.0

DEFAULT_USER_AGENTS: Sequence[str] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/61.0.3163.100 Safari/537.36",
    "Mozilla/5.0 (Windows NT 6.1; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/61.0.3163.100 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_6) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/61.0.3163.100 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_6) AppleWebKit/604.1.38 (KHTML, like Gecko) "
    "Version/11.0 Safari/604.1.38",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:56.0) Gecko/20100101 Firefox/56.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_13) AppleWebKit/604.1.38 (KHTML, like Gecko) "
    "Version/11.0 Safari/604.1.38",
)


class Fetcher:
    """Issues GET requests through one shared aiohttp session."""

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        session: Optional[ClientSession] = None,
        *,
        user_agents: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if user_agents is None:
            user_agents = config.user_agents if config is not None else DEFAULT_USER_AGENTS
        if timeout is None:
            timeout = config.timeout if config is not None else DEFAULT_TIMEOUT
        if not user_agents:
            raise ValueError("user_agents must not be empty")
        self.user_agents: Sequence[str] = tuple(user_agents)
        self.timeout = timeout
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(timeout=ClientTimeout(total=self.timeout))
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    def random_user_agent(self) -> str:
        return random.choice(self.user_agents)

    async def fetch(self, url: str) -> FetchResponse | None:
        """
        GET *url* and return its status and body.

        Returns None on connection errors, HTTP error statuses (>= 400), timeouts
        and bodies that cannot be decoded.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        headers = {"User-Agent": self.random_user_agent()}
        try:
            async with self.session.get(
                url,
                headers=headers,
                timeout=ClientTimeout(total=self.timeout),
                raise_for_status=True,
            ) as resp:
                text = await resp.text(errors="replace")
                return FetchResponse(url=url, status=resp.status, text=text)
        except asyncio.TimeoutError:
            logger.debug("Timeout after %.1f s: %s", self.timeout, url)
        except (ClientError, UnicodeDecodeError, LookupError) as exc:
            logger.debug("Fetch failed %s: %s", url, exc)
        return None


__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENTS", "Fetcher"]
