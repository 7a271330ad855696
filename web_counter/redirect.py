"""Permanent redirects between HTTP and HTTPS, or to a fixed URL.

Never install `redirect_to_https` on a site served over HTTPS (or
`redirect_to_http` on one served over HTTP): every request would be sent
back to itself.
"""
import logging
from urllib.parse import urlsplit, urlunsplit

from flask import redirect, request
from flask.views import View

logger = logging.getLogger(__name__)


def _with_scheme(req, scheme: str) -> str:
    parts = urlsplit(req.url)
    return urlunsplit(parts._replace(scheme=scheme, netloc=req.host, fragment=""))


def redirect_to_https(req):
    """Redirect `req` to the same page over HTTPS."""
    target = _with_scheme(req, "https")
    logger.debug("redirecting %s to %s", req.url, target)
    return redirect(target, code=301)


def redirect_to_http(req):
    """Redirect `req` to the same page over HTTP."""
    target = _with_scheme(req, "http")
    logger.debug("redirecting %s to %s", req.url, target)
    return redirect(target, code=301)


def redirect_to_https_view(**kwargs):
    return redirect_to_https(request)


def redirect_to_http_view(**kwargs):
    return redirect_to_http(request)


class Redirect(View):
    """Redirects every request it serves to `target`.

        app.add_url_rule("/home", view_func=Redirect.as_view("home", "/"))
    """

    def __init__(self, target: str):
        self.target = target

    def dispatch_request(self, **kwargs):
        return redirect(self.target, code=301)
