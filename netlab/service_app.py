"""HTTP front end of the teacher and course service."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any

from flask import Flask, Response, jsonify, request

from netlab.service_db import (
    AppState,
    connect,
    delete_course_db,
    delete_teacher_db,
    get_all_teachers_db,
    get_course_details_db,
    get_courses_for_teacher_db,
    get_teacher_details_db,
    init_schema,
    post_new_course_db,
    post_new_teacher_db,
    update_course_details_db,
    update_teacher_details_db,
)
from netlab.service_errors import WebServiceError
from netlab.service_models import CreateCourse, CreateTeacher, UpdateCourse, UpdateTeacher

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
HEALTH_RESPONSE = "I'm OK."
BASIC_HEALTH_RESPONSE = "Actix Web Service is running!"

_ALLOWED_ORIGIN = "http://localhost:8080/"
_ALLOWED_METHODS = "GET, POST, PUT, DELETE, PATCH, OPTIONS"
_ALLOWED_HEADERS = "authorization, accept, content-type"
_MAX_AGE = "3600"


def _origin_allowed(origin: str) -> bool:
    return origin == _ALLOWED_ORIGIN or origin.startswith("http://localhost")


def _add_cors_headers(response: Response) -> Response:
    origin = request.headers.get("Origin")
    if origin is None or not _origin_allowed(origin):
        return response
    response.headers["Access-Control-Allow-Origin"] = origin
    response.headers.add("Vary", "Origin")
    if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
        response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
        response.headers["Access-Control-Allow-Headers"] = _ALLOWED_HEADERS
        response.headers["Access-Control-Max-Age"] = _MAX_AGE
    return response


def _json_body() -> Any:
    # A missing, mistyped or malformed body yields None, which the models reject.
    return request.get_json(silent=True)


def _register_general_routes(app: Flask, state: AppState) -> None:
    @app.get("/health")
    def health_check_handler() -> Response:
        print("incoming for health check")
        count = state.record_visit()
        return jsonify(f"{state.health_check_response} {count} times")


def _register_course_routes(app: Flask, state: AppState) -> None:
    @app.post("/courses/")
    def post_new_course() -> Response:
        new_course = CreateCourse.from_dict(_json_body())
        return jsonify(post_new_course_db(state.db, new_course).to_dict())

    @app.get("/courses/<int(signed=True):teacher_id>")
    def get_courses_for_teacher(teacher_id: int) -> Response:
        courses = get_courses_for_teacher_db(state.db, teacher_id)
        return jsonify([course.to_dict() for course in courses])

    @app.get("/courses/<int(signed=True):teacher_id>/<int(signed=True):course_id>")
    def get_course_detail(teacher_id: int, course_id: int) -> Response:
        return jsonify(get_course_details_db(state.db, teacher_id, course_id).to_dict())

    @app.delete("/courses/<int(signed=True):teacher_id>/<int(signed=True):course_id>")
    def delete_course(teacher_id: int, course_id: int) -> Response:
        return jsonify(delete_course_db(state.db, teacher_id, course_id))

    @app.put("/courses/<int(signed=True):teacher_id>/<int(signed=True):course_id>")
    def update_course_details(teacher_id: int, course_id: int) -> Response:
        update_course = UpdateCourse.from_dict(_json_body())
        course = update_course_details_db(state.db, teacher_id, course_id, update_course)
        return jsonify(course.to_dict())


def _register_teacher_routes(app: Flask, state: AppState) -> None:
    @app.post("/teachers/")
    def post_new_teacher() -> Response:
        new_teacher = CreateTeacher.from_dict(_json_body())
        return jsonify(post_new_teacher_db(state.db, new_teacher).to_dict())

    @app.get("/teachers/")
    def get_all_teachers() -> Response:
        return jsonify([teacher.to_dict() for teacher in get_all_teachers_db(state.db)])

    @app.get("/teachers/<int(signed=True):teacher_id>")
    def get_teacher_details(teacher_id: int) -> Response:
        return jsonify(get_teacher_details_db(state.db, teacher_id).to_dict())

    @app.put("/teachers/<int(signed=True):teacher_id>")
    def update_teacher_details(teacher_id: int) -> Response:
        update_teacher = UpdateTeacher.from_dict(_json_body())
        return jsonify(update_teacher_details_db(state.db, teacher_id, update_teacher).to_dict())

    @app.delete("/teachers/<int(signed=True):teacher_id>")
    def delete_teacher(teacher_id: int) -> Response:
        return jsonify(delete_teacher_db(state.db, teacher_id))


def create_app(state: AppState | None = None) -> Flask:
    """Build the service application.

    With a state the full teacher and course API is served; without one only
    a fixed health check is.
    """
    app = Flask(__name__)
    app.json.sort_keys = False

    if state is None:

        @app.get("/health")
        def basic_health_check() -> Response:
            return jsonify(BASIC_HEALTH_RESPONSE)

        return app

    @app.errorhandler(WebServiceError)
    def handle_service_error(err: WebServiceError) -> tuple[Response, int]:
        body, status = err.to_response()
        return jsonify(body), status

    app.after_request(_add_cors_headers)
    _register_general_routes(app, state)
    _register_course_routes(app, state)
    _register_teacher_routes(app, state)
    return app


def main(argv: list[str] | None = None) -> int:
    """Run the service on the given address."""
    parser = argparse.ArgumentParser(description="Teacher and course web service")
    parser.add_argument(
        "--database-url",
        default=os.environ.get("DATABASE_URL"),
        help="database path or sqlite: URL (default: $DATABASE_URL)",
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--health-only", action="store_true", help="serve only a fixed health check"
    )
    args = parser.parse_args(argv)

    if args.health_only:
        app = create_app()
    else:
        if not args.database_url:
            parser.error("DATABASE_URL is not set")
        try:
            db = connect(args.database_url)
        except ValueError as err:
            parser.error(str(err))
        init_schema(db)
        app = create_app(AppState(health_check_response=HEALTH_RESPONSE, db=db))

    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())