from .clean_service import CleanService
from .redirect_resolver import HttpxRedirectResolver, RedirectResolver
from .url_extraction import extract_url
from .url_normalization import DomainRule, DomainRuleEngine, UrlCleaner, build_default_rules

__all__ = [
    "CleanService",
    "RedirectResolver",
    "HttpxRedirectResolver",
    "extract_url",
    "UrlCleaner",
    "DomainRule",
    "DomainRuleEngine",
    "build_default_rules",
]
