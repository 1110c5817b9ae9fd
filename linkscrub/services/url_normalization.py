from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from linkscrub.services.redirect_resolver import RedirectResolver

logger = logging.getLogger(__name__)

FIXUPX_HOST = "fixupx.com"
XSEC_TOKEN = "xsec_token"
XSEC_SOURCE = ("xsec_source", "pc_user")


class UrlCleaner:
    """Strategy interface."""
    def clean(self, url: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class DomainRule:
    name: str
    matches: Callable[[str], bool]      # hostname -> bool
    transform: Callable[[str], str]     # url -> url


def host_equals(host: str) -> Callable[[str], bool]:
    host = host.lower()
    return lambda hostname: hostname == host


def host_contains(*needles: str) -> Callable[[str], bool]:
    lowered = tuple(n.lower() for n in needles)
    return lambda hostname: any(n in hostname for n in lowered)


def hostname_of(url: str) -> str:
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""


def _truncate_at(url: str, marker: str) -> str:
    idx = url.find(marker)
    return url[:idx] if idx != -1 else url


def _with_host(parts: SplitResult, new_host: str) -> SplitResult:
    userinfo, at, hostport = parts.netloc.rpartition("@")
    _, colon, port = hostport.partition(":")
    return parts._replace(netloc=f"{userinfo}{at}{new_host}{colon}{port}")


# -----------------------------
# Transforms
# -----------------------------
def rewrite_to_fixupx(url: str) -> str:
    return urlunsplit(_with_host(urlsplit(url), FIXUPX_HOST))


def keep_xsec_token(url: str) -> str:
    """Xiaohongshu links need xsec_token to open; everything else is tracking."""
    parts = urlsplit(url)
    token = next((v for k, v in parse_qsl(parts.query, keep_blank_values=True) if k == XSEC_TOKEN), "")

    params = [(XSEC_TOKEN, token)] if token else []
    params.append(XSEC_SOURCE)
    return urlunsplit(parts._replace(query=urlencode(params)))


def truncate_before_chksm(url: str) -> str:
    return _truncate_at(url, "&chksm")


def truncate_before_first_ampersand(url: str) -> str:
    return _truncate_at(url, "&")


def strip_query(url: str) -> str:
    return urlunsplit(urlsplit(url)._replace(query=""))


def resolve_then_truncate(resolver: RedirectResolver) -> Callable[[str], str]:
    def _transform(url: str) -> str:
        return truncate_before_first_ampersand(resolver.resolve(url))
    return _transform


FALLBACK_RULE = DomainRule("strip_query", lambda _hostname: True, strip_query)


def build_default_rules(resolver: RedirectResolver) -> list[DomainRule]:
    """Ordered rule table; the first rule whose host predicate matches wins."""
    return [
        DomainRule("x", host_equals("x.com"), rewrite_to_fixupx),
        DomainRule("xiaohongshu", host_contains("xiaohongshu", "xhslink"), keep_xsec_token),
        DomainRule("weixin", host_contains("weixin"), truncate_before_chksm),
        DomainRule("netease_music", host_contains("music.163.com"), truncate_before_first_ampersand),
        DomainRule("netease_short", host_contains("163cn.tv"), resolve_then_truncate(resolver)),
    ]


@dataclass(frozen=True)
class DomainRuleEngine(UrlCleaner):
    rules: Sequence[DomainRule] = field(default_factory=list)
    fallback: DomainRule = FALLBACK_RULE

    def select(self, url: str) -> DomainRule:
        hostname = hostname_of(url)
        return next((r for r in self.rules if r.matches(hostname)), self.fallback)

    def clean(self, url: str) -> str:
        rule = self.select(url)
        cleaned = rule.transform(url)
        logger.debug("Rule %s: %s -> %s", rule.name, url, cleaned)
        return cleaned
