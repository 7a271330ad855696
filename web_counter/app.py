from flask import Flask, make_response, request, send_from_directory
from datetime import timedelta
import logging, os

from web_counter.cache import ONE_YEAR, cache, do_not_cache
from web_counter.pageviews import PageViews
from web_counter.paths import use_path, use_prefix
from web_counter.redirect import Redirect, redirect_to_https

logger = logging.getLogger(__name__)

app = Flask(__name__)

app.config.update(
    HOST=os.getenv("HOST", "127.0.0.1"),
    PORT=int(os.getenv("PORT", "8080")),
    THREADS=int(os.getenv("THREADS", "20")),
    CONTENT_ROOT=os.path.abspath(os.getenv("CONTENT_ROOT", ".")),
    CACHE_SECONDS=int(os.getenv("CACHE_SECONDS", str(int(ONE_YEAR.total_seconds())))),
    FORCE_HTTPS=os.getenv("FORCE_HTTPS", "0").lower() in ("1", "true", "yes"),
    LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
)

page_views = PageViews()


@app.before_request
def force_https():
    if app.config["FORCE_HTTPS"] and not request.is_secure:
        return redirect_to_https(request)


def serve_content(req, path: str):
    """Serve `path` from the content root as a cacheable page view.

    Only responses that carry the content count as a view; a 304 to a
    conditional request does not.
    """
    max_age = app.config["CACHE_SECONDS"]
    resp = send_from_directory(app.config["CONTENT_ROOT"], path.lstrip("/"), max_age=max_age)
    if resp.status_code < 300:
        page_views.add()
    return cache(resp, resp.last_modified, timedelta(seconds=max_age))


@app.get("/inc")
def inc():
    # Not a fetch-and-add: concurrent requests may report the same count.
    page_views.add()
    return do_not_cache(make_response(str(page_views.count())))


@app.get("/count")
def count():
    return do_not_cache(make_response(str(page_views.count())))


app.add_url_rule("/", view_func=use_path("content/index.html", serve_content, "index"))
app.add_url_rule("/index.html", view_func=use_path("content/index.html", serve_content, "index_html"))
app.add_url_rule("/images/<path:name>", view_func=use_prefix("content", serve_content, "images"))
app.add_url_rule("/home", view_func=Redirect.as_view("home", "/"))


def main():
    from waitress import serve

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("serving on %s:%s threads=%s", app.config["HOST"], app.config["PORT"], app.config["THREADS"])
    serve(app, host=app.config["HOST"], port=app.config["PORT"], threads=app.config["THREADS"])


if __name__ == "__main__":
    main()
