"""HTTP helpers for Flask sites and a thread-safe page view counter."""
from web_counter.cache import ONE_YEAR, cache, do_not_cache
from web_counter.pageviews import PageViews
from web_counter.paths import PathHandler, use_path, use_prefix
from web_counter.redirect import (
    Redirect,
    redirect_to_http,
    redirect_to_http_view,
    redirect_to_https,
    redirect_to_https_view,
)

__all__ = [
    "ONE_YEAR",
    "PageViews",
    "PathHandler",
    "Redirect",
    "cache",
    "do_not_cache",
    "redirect_to_http",
    "redirect_to_http_view",
    "redirect_to_https",
    "redirect_to_https_view",
    "use_path",
    "use_prefix",
]
