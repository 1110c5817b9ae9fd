from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from linkscrub.domain.errors import EmptyInputError, NoUrlFoundError, PipelineError
from linkscrub.domain.models import CleanResult
from linkscrub.services.redirect_resolver import RedirectResolver
from linkscrub.services.url_extraction import extract_url
from linkscrub.services.url_normalization import UrlCleaner

logger = logging.getLogger(__name__)


@dataclass
class CleanService:
    """
    Service layer: extract -> resolve -> clean for one pasted text blob.
    Every pipeline failure comes back as a failed CleanResult; nothing is retried.
    """
    resolver: RedirectResolver
    cleaner: UrlCleaner
    extractor: Callable[[str], Optional[str]] = extract_url

    def process(self, text: str) -> CleanResult:
        text = text or ""
        candidate = ""
        resolved = ""

        try:
            if not text.strip():
                raise EmptyInputError()

            candidate = self.extractor(text) or ""
            if not candidate:
                raise NoUrlFoundError()

            resolved = self.resolver.resolve(candidate)
            clean_url = self.cleaner.clean(resolved)
        except PipelineError as e:
            logger.warning("Pipeline failed (%s): %s", type(e).__name__, e)
            return CleanResult(
                status="failed",
                input_text=text,
                candidate_url=candidate,
                resolved_url=resolved,
                clean_url="",
                error=e,
            )

        logger.info("Cleaned %s -> %s", candidate, clean_url)
        return CleanResult(
            status="ok",
            input_text=text,
            candidate_url=candidate,
            resolved_url=resolved,
            clean_url=clean_url,
        )
