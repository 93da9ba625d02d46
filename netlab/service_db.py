"""Storage of teachers and courses, and the state shared by request handlers."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, fields

from netlab.service_errors import DBError, NotFound
from netlab.service_models import (
    Course,
    CreateCourse,
    CreateTeacher,
    Teacher,
    UpdateCourse,
    UpdateTeacher,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS teachers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    picture_url TEXT,
    profile TEXT
);
CREATE TABLE IF NOT EXISTS course (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    teacher_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    time TEXT DEFAULT CURRENT_TIMESTAMP,
    description TEXT,
    format TEXT,
    structure TEXT,
    duration TEXT,
    price INTEGER,
    language TEXT,
    level TEXT
);
"""

_COURSE_COLUMNS = ", ".join(f.name for f in fields(Course))
_COURSE_INPUT = tuple(f.name for f in fields(CreateCourse))
_COURSE_UPDATE = tuple(f.name for f in fields(UpdateCourse))


@dataclass
class AppState:
    """State shared by every request: health message, visit counter, database."""

    health_check_response: str
    db: sqlite3.Connection
    visit_count: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_visit(self) -> int:
        """Count a visit and return the count as it was before this one."""
        with self._lock:
            previous = self.visit_count
            self.visit_count += 1
            return previous


@contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as err:
        raise DBError(str(err)) from err


def connect(database_url: str) -> sqlite3.Connection:
    """Open a database given a path or a sqlite: URL such as sqlite::memory:."""
    path = database_url
    for prefix in ("sqlite://", "sqlite:"):
        if path.startswith(prefix):
            path = path[len(prefix):]
            break
    if not path:
        raise ValueError(f"no database path in {database_url!r}")
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create the teachers and course tables if they are missing."""
    with _database_errors():
        conn.executescript(_SCHEMA)
        conn.commit()


def _teacher(row: sqlite3.Row) -> Teacher:
    return Teacher(id=row["id"], name=row["name"], picture_url=row["picture_url"], profile=row["profile"])


def _fetch_course(conn: sqlite3.Connection, teacher_id: int, course_id: int) -> Course | None:
    row = conn.execute(
        f"SELECT {_COURSE_COLUMNS} FROM course WHERE teacher_id = ? AND id = ?",
        (teacher_id, course_id),
    ).fetchone()
    return Course.from_row(row) if row is not None else None


def get_courses_for_teacher_db(conn: sqlite3.Connection, teacher_id: int) -> list[Course]:
    """Return every course of a teacher, in order of id."""
    with _database_errors():
        rows = conn.execute(
            f"SELECT {_COURSE_COLUMNS} FROM course WHERE teacher_id = ? ORDER BY id",
            (teacher_id,),
        ).fetchall()
    return [Course.from_row(row) for row in rows]


def get_course_details_db(conn: sqlite3.Connection, teacher_id: int, course_id: int) -> Course:
    """Return one course of a teacher; raise NotFound if there is none."""
    try:
        course = _fetch_course(conn, teacher_id, course_id)
    except sqlite3.Error:
        course = None
    if course is None:
        raise NotFound("Course didn't founded")
    return course


def post_new_course_db(conn: sqlite3.Connection, new_course: CreateCourse) -> Course:
    """Insert a course and return it as stored."""
    placeholders = ", ".join("?" for _ in _COURSE_INPUT)
    with _database_errors(), conn:
        cursor = conn.execute(
            f"INSERT INTO course ({', '.join(_COURSE_INPUT)}) VALUES ({placeholders})",
            tuple(getattr(new_course, name) for name in _COURSE_INPUT),
        )
        row = conn.execute(
            f"SELECT {_COURSE_COLUMNS} FROM course WHERE id = ?", (cursor.lastrowid,)
        ).fetchone()
    return Course.from_row(row)


def delete_course_db(conn: sqlite3.Connection, teacher_id: int, course_id: int) -> str:
    """Delete a teacher's course and report how many records went."""
    with _database_errors(), conn:
        cursor = conn.execute(
            "DELETE FROM course WHERE teacher_id = ? AND id = ?", (teacher_id, course_id)
        )
    return f"Deleted {cursor.rowcount} record"


def update_course_details_db(
    conn: sqlite3.Connection, teacher_id: int, course_id: int, update_course: UpdateCourse
) -> Course:
    """Apply the given changes to a course and return it.

    Fields left out keep their value; stored empty values become "" or 0.
    """
    try:
        current = _fetch_course(conn, teacher_id, course_id)
    except sqlite3.Error:
        current = None
    if current is None:
        raise NotFound("Course Id not found")

    values = {}
    for name in _COURSE_UPDATE:
        new_value = getattr(update_course, name)
        if new_value is None:
            new_value = getattr(current, name)
        if new_value is None:
            new_value = 0 if name == "price" else ""
        values[name] = new_value

    assignments = ", ".join(f"{name} = ?" for name in _COURSE_UPDATE)
    try:
        with conn:
            cursor = conn.execute(
                f"UPDATE course SET {assignments} WHERE teacher_id = ? AND id = ?",
                (*values.values(), teacher_id, course_id),
            )
            updated = _fetch_course(conn, teacher_id, course_id) if cursor.rowcount else None
    except sqlite3.Error:
        updated = None
    if updated is None:
        raise NotFound("Course id not found")
    return updated


def get_all_teachers_db(conn: sqlite3.Connection) -> list[Teacher]:
    """Return every teacher; raise NotFound if there are none."""
    with _database_errors():
        rows = conn.execute(
            "SELECT id, name, picture_url, profile FROM teachers ORDER BY id"
        ).fetchall()
    if not rows:
        raise NotFound("No teachers found")
    return [_teacher(row) for row in rows]


def get_teacher_details_db(conn: sqlite3.Connection, teacher_id: int) -> Teacher:
    """Return one teacher; raise NotFound if there is none."""
    try:
        row = conn.execute(
            "SELECT id, name, picture_url, profile FROM teachers WHERE id = ?", (teacher_id,)
        ).fetchone()
    except sqlite3.Error:
        row = None
    if row is None:
        raise NotFound("Teacher id not found")
    return _teacher(row)


def post_new_teacher_db(conn: sqlite3.Connection, new_teacher: CreateTeacher) -> Teacher:
    """Insert a teacher and return it as stored."""
    with _database_errors(), conn:
        cursor = conn.execute(
            "INSERT INTO teachers (name, picture_url, profile) VALUES (?, ?, ?)",
            (new_teacher.name, new_teacher.picture_url, new_teacher.profile),
        )
        row = conn.execute(
            "SELECT id, name, picture_url, profile FROM teachers WHERE id = ?",
            (cursor.lastrowid,),
        ).fetchone()
    return _teacher(row)


def update_teacher_details_db(
    conn: sqlite3.Connection, teacher_id: int, update_teacher: UpdateTeacher
) -> Teacher:
    """Replace a teacher's fields with the given values, absent ones included."""
    get_teacher_details_db(conn, teacher_id)
    try:
        with conn:
            cursor = conn.execute(
                "UPDATE teachers SET name = ?, picture_url = ?, profile = ? WHERE id = ?",
                (update_teacher.name, update_teacher.picture_url, update_teacher.profile, teacher_id),
            )
            row = (
                conn.execute(
                    "SELECT id, name, picture_url, profile FROM teachers WHERE id = ?",
                    (teacher_id,),
                ).fetchone()
                if cursor.rowcount
                else None
            )
    except sqlite3.Error:
        row = None
    if row is None:
        raise NotFound("Teacher id not found")
    return _teacher(row)


def delete_teacher_db(conn: sqlite3.Connection, teacher_id: int) -> str:
    """Delete a teacher and report how many records went."""
    try:
        with conn:
            cursor = conn.execute("DELETE FROM teachers WHERE id = ?", (teacher_id,))
    except sqlite3.Error as err:
        raise NotFound("Unable to delete teacher") from err
    return f"Deleted {cursor.rowcount} record"