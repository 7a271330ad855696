from flask import Flask

from web_counter.paths import use_path, use_prefix

calls = []


def record(req, path):
    calls.append((req.path, path))
    return path


app = Flask(__name__)
app.add_url_rule("/", view_func=use_path("content/index.html", record, "root"))
app.add_url_rule("/index.html", view_func=use_path("content/index.html", record, "index"))
app.add_url_rule("/pics/<path:name>", view_func=use_prefix("images", record, "pics"))

client = app.test_client()


def setup_function():
    calls.clear()


def test_use_path_passes_fixed_path():
    assert client.get("/").get_data(as_text=True) == "content/index.html"
    assert client.get("/index.html").get_data(as_text=True) == "content/index.html"
    assert calls == [("/", "content/index.html"), ("/index.html", "content/index.html")]


def test_use_prefix_prepends_request_path():
    r = client.get("/pics/cat.jpg")
    assert r.get_data(as_text=True) == "images/pics/cat.jpg"
    assert calls == [("/pics/cat.jpg", "images/pics/cat.jpg")]


def test_view_name_defaults_to_handler_name():
    assert use_path("x", record).__name__ == "record"
    assert use_prefix("x", record, "named").__name__ == "named"
