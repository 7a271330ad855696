"""Response headers that tell clients whether to cache a response."""
from datetime import datetime, timedelta, timezone

from werkzeug.http import http_date

# Slightly less than one year, to conform to RFC 2616.
ONE_YEAR = timedelta(days=364)


def do_not_cache(response):
    """Advise the client not to cache the response."""
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"
    return response


def cache(response, mod_time: datetime | None, duration: timedelta):
    """Advise the client to cache the response for `duration`.

    Last-Modified is only set when `mod_time` is given. Naive datetimes are
    taken to be UTC.
    """
    if mod_time is not None:
        if mod_time.tzinfo is None:
            mod_time = mod_time.replace(tzinfo=timezone.utc)
        response.headers["Last-Modified"] = http_date(mod_time)
    response.headers["Expires"] = http_date(datetime.now(timezone.utc) + duration)
    response.headers["Vary"] = "Accept-Encoding"
    return response
