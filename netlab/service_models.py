"""Records exchanged by the teacher and course service."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any

from netlab.service_errors import InvalidInput

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _take(data: Any, name: str, kind: type, required: bool) -> Any:
    value = data.get(name)
    if value is None:
        if required:
            raise InvalidInput("Invalid input")
        return None
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInput("Invalid input")
        if not _I32_MIN <= value <= _I32_MAX:
            raise InvalidInput("Invalid input")
    elif not isinstance(value, kind):
        raise InvalidInput("Invalid input")
    return value


def _require_mapping(data: Any) -> None:
    if not isinstance(data, dict):
        raise InvalidInput("Invalid input")


def _parse_time(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass
class Course:
    """A course as stored in the database."""

    id: int
    teacher_id: int
    name: str
    time: datetime | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_row(cls, row: Any) -> Course:
        """Build a course from a database row addressed by column name."""
        values = {f.name: row[f.name] for f in fields(cls)}
        values["time"] = _parse_time(values["time"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dictionary; the time is in ISO 8601 form."""
        data = asdict(self)
        data["time"] = self.time.isoformat() if self.time is not None else None
        return data


@dataclass
class CreateCourse:
    """The fields a client supplies to create a course."""

    teacher_id: int
    name: str
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> CreateCourse:
        """Validate decoded JSON; teacher_id and name are required."""
        _require_mapping(data)
        return cls(
            teacher_id=_take(data, "teacher_id", int, True),
            name=_take(data, "name", str, True),
            description=_take(data, "description", str, False),
            format=_take(data, "format", str, False),
            structure=_take(data, "structure", str, False),
            duration=_take(data, "duration", str, False),
            price=_take(data, "price", int, False),
            language=_take(data, "language", str, False),
            level=_take(data, "level", str, False),
        )


@dataclass
class UpdateCourse:
    """The fields a client may change on a course; None leaves them alone."""

    name: str | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> UpdateCourse:
        """Validate decoded JSON; every field is optional."""
        _require_mapping(data)
        return cls(
            **{
                f.name: _take(data, f.name, int if f.name == "price" else str, False)
                for f in fields(cls)
            }
        )


@dataclass
class Teacher:
    """A teacher as stored in the database."""

    id: int
    name: str | None = None
    picture_url: str | None = None
    profile: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dictionary."""
        return asdict(self)


@dataclass
class CreateTeacher:
    """The fields a client supplies to register a teacher."""

    name: str
    picture_url: str
    profile: str

    @classmethod
    def from_dict(cls, data: Any) -> CreateTeacher:
        """Validate decoded JSON; all fields are required."""
        _require_mapping(data)
        return cls(**{f.name: _take(data, f.name, str, True) for f in fields(cls)})


@dataclass
class UpdateTeacher:
    """New values for a teacher's fields."""

    name: str | None = None
    picture_url: str | None = None
    profile: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> UpdateTeacher:
        """Validate decoded JSON; every field is optional."""
        _require_mapping(data)
        return cls(**{f.name: _take(data, f.name, str, False) for f in fields(cls)})