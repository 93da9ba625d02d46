import json

import pytest

from netlab.handlers import (
    OrderStatus,
    load_file,
    load_orders,
    page_not_found,
    static_page,
    web_service,
)
from netlab.http_request import HttpMethod, HttpRequest

ORDERS = [
    {"id": 1, "date": "2024-01-01", "status": "Delivered"},
    {"id": 2, "date": "2024-01-02", "status": "Pending"},
]


@pytest.fixture
def site(tmp_path, monkeypatch):
    public = tmp_path / "public"
    public.mkdir()
    (public / "200.html").write_text("<h1>ok</h1>", encoding="utf-8")
    (public / "404.html").write_text("<h1>missing</h1>", encoding="utf-8")
    (public / "style.css").write_text("body {}", encoding="utf-8")
    (public / "app.js").write_text("run();", encoding="utf-8")
    (public / "page.html").write_text("<p>page</p>", encoding="utf-8")
    data = tmp_path / "data"
    data.mkdir()
    (data / "orders.json").write_text(json.dumps(ORDERS), encoding="utf-8")
    monkeypatch.setenv("PUBLIC_PATH", str(public))
    monkeypatch.setenv("DATA_PATH", str(data))
    return tmp_path


def get(resource):
    return HttpRequest(method=HttpMethod.GET, resource=resource)


def test_load_file_reads_public_file(site):
    assert load_file("style.css") == "body {}"


def test_load_file_missing_is_none(site):
    assert load_file("nope.html") is None


def test_load_orders(site):
    assert load_orders() == [
        OrderStatus(1, "2024-01-01", "Delivered"),
        OrderStatus(2, "2024-01-02", "Pending"),
    ]


def test_load_orders_missing_file_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_PATH", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        load_orders()


def test_page_not_found(site):
    response = page_not_found(get("/whatever"))
    assert response.status_code == "404"
    assert response.status_text == "Not Found"
    assert response.body == "<h1>missing</h1>"


@pytest.mark.parametrize("resource", ["/", "/health"])
def test_static_root_and_health(site, resource):
    response = static_page(get(resource))
    assert response.status_code == "200"
    assert response.body == "<h1>ok</h1>"
    assert response.headers == {"Content-Type": "application/json"}


@pytest.mark.parametrize(
    "resource, content_type, body",
    [
        ("/style.css", "text/css", "body {}"),
        ("/app.js", "text/javascript", "run();"),
        ("/page.html", "text/html", "<p>page</p>"),
    ],
)
def test_static_files_content_type(site, resource, content_type, body):
    response = static_page(get(resource))
    assert response.status_code == "200"
    assert response.headers == {"Content-Type": content_type}
    assert response.body == body


def test_static_missing_file_is_404(site):
    response = static_page(get("/absent.html"))
    assert response.status_code == "404"
    assert response.body == "<h1>missing</h1>"


def test_static_rejects_resource_without_slash(site):
    with pytest.raises(ValueError):
        static_page(get("index"))


def test_web_service_orders(site):
    response = web_service(get("/api/shopping/orders"))
    assert response.status_code == "200"
    assert response.headers == {"Content-type": "application/json"}
    assert json.loads(response.body) == ORDERS


@pytest.mark.parametrize("resource", ["/api", "/api/shopping", "/api/other/orders"])
def test_web_service_unknown_is_404(site, resource):
    response = web_service(get(resource))
    assert response.status_code == "404"
    assert response.body == "<h1>missing</h1>"