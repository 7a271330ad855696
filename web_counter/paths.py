"""Views that hand a path handler a rewritten path instead of the request's.

Lets several URLs serve the same file:

    app.add_url_rule("/", view_func=use_path("content/index.html", serve_content))
"""
from typing import Callable

from flask import request
from flask.typing import ResponseReturnValue
from werkzeug.wrappers import Request

PathHandler = Callable[[Request, str], ResponseReturnValue]


def use_path(path: str, handler: PathHandler, name: str | None = None):
    """Return a view calling `handler` with the fixed `path`."""

    def view(**kwargs):
        return handler(request, path)

    view.__name__ = name or handler.__name__
    return view


def use_prefix(prefix: str, handler: PathHandler, name: str | None = None):
    """Return a view calling `handler` with `prefix` + the request path."""

    def view(**kwargs):
        return handler(request, prefix + request.path)

    view.__name__ = name or handler.__name__
    return view
