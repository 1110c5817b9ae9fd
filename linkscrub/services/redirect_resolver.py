from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from linkscrub.domain.errors import ResolutionError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; linkscrub/1.0)"


class RedirectResolver:
    """Strategy interface."""
    def resolve(self, url: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class HttpxRedirectResolver(RedirectResolver):
    """
    Follows a redirect chain with HEAD requests and returns the final URL.
    A non-redirect response (2xx, 4xx, 5xx) ends the chain; its URL is the result.
    """
    timeout_seconds: float = 10.0
    max_redirects: int = 20
    user_agent: str = DEFAULT_USER_AGENT

    def resolve(self, url: str) -> str:
        logger.debug("Resolving %s", url)
        try:
            with httpx.Client(
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout_seconds,
                follow_redirects=True,
                max_redirects=self.max_redirects,
            ) as client:
                response = client.head(url)
        # ValueError covers malformed hosts rejected during IDNA encoding
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning("Could not resolve %s: %s", url, e)
            raise ResolutionError(url, str(e)) from e

        final_url = str(response.url)
        if response.history:
            logger.debug("Resolved %s -> %s after %d redirect(s)", url, final_url, len(response.history))
        return final_url
