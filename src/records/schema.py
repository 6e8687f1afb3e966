from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Mapping

SCHOLARSHIP_FIELDS = (
    "id",
    "title",
    "country",
    "eligibleNationality",
    "level",
    "field",
    "deadline",
    "sponsor",
    "eligibility",
    "benefits",
    "description",
    "link",
    "tags",
)

POST_FIELDS = ("id", "title", "author", "date", "summary", "content")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(tag.strip() for tag in value.split(",") if tag.strip())
    if isinstance(value, (list, tuple)):
        return tuple(str(tag) for tag in value)
    return ()


@dataclass(frozen=True, slots=True)
class Scholarship:
    """Catalog entry, persisted with the camelCase keys in SCHOLARSHIP_FIELDS."""

    id: str
    title: str = ""
    country: str = ""
    eligible_nationality: str = ""
    level: str = ""
    field: str = ""
    deadline: str = ""
    sponsor: str = ""
    eligibility: str = ""
    benefits: str = ""
    description: str = ""
    link: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Scholarship id must be a non-empty string.")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Scholarship:
        raw_id = payload.get("id")
        return cls(
            id=_text(raw_id),
            title=_text(payload.get("title")),
            country=_text(payload.get("country")),
            eligible_nationality=_text(payload.get("eligibleNationality")),
            level=_text(payload.get("level")),
            field=_text(payload.get("field")),
            deadline=_text(payload.get("deadline")),
            sponsor=_text(payload.get("sponsor")),
            eligibility=_text(payload.get("eligibility")),
            benefits=_text(payload.get("benefits")),
            description=_text(payload.get("description")),
            link=_text(payload.get("link")),
            tags=_tags(payload.get("tags")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "country": self.country,
            "eligibleNationality": self.eligible_nationality,
            "level": self.level,
            "field": self.field,
            "deadline": self.deadline,
            "sponsor": self.sponsor,
            "eligibility": self.eligibility,
            "benefits": self.benefits,
            "description": self.description,
            "link": self.link,
            "tags": list(self.tags),
        }


@dataclass(frozen=True, slots=True)
class BlogPost:
    id: str
    title: str = ""
    author: str = ""
    date: str = ""
    summary: str = ""
    content: str = ""

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> BlogPost:
        return cls(**{name: _text(payload.get(name)) for name in POST_FIELDS})

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in POST_FIELDS}


@dataclass(slots=True)
class Account:
    email: str
    password: str
    bookmarks: list[str] = field(default_factory=list)
    is_admin: bool = False

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Account:
        bookmarks: list[str] = []
        for item in payload.get("bookmarks") or []:
            bookmark_id = str(item)
            if bookmark_id not in bookmarks:
                bookmarks.append(bookmark_id)
        return cls(
            email=_text(payload.get("email")),
            password=_text(payload.get("password")),
            bookmarks=bookmarks,
            is_admin=payload.get("isAdmin") is True,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "password": self.password,
            "bookmarks": list(self.bookmarks),
            "isAdmin": self.is_admin,
        }


@dataclass(frozen=True, slots=True)
class Session:
    """Snapshot of the signed-in account, not a live reference to it."""

    email: str
    is_admin: bool = False

    @classmethod
    def from_mapping(cls, payload: Any) -> Session | None:
        if not isinstance(payload, Mapping):
            return None
        email = payload.get("email")
        if not isinstance(email, str) or not email:
            return None
        return cls(email=email, is_admin=payload.get("isAdmin") is True)

    def to_dict(self) -> dict[str, Any]:
        return {"email": self.email, "isAdmin": self.is_admin}


@dataclass(frozen=True, slots=True)
class ContactMessage:
    name: str
    email: str
    message: str
    date: str

    @classmethod
    def create(cls, name: str, email: str, message: str, *, now: datetime | None = None) -> ContactMessage:
        created_at = (now or datetime.now(tz=UTC)).astimezone(UTC)
        return cls(
            name=name,
            email=email,
            message=message,
            date=created_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> ContactMessage:
        return cls(
            name=_text(payload.get("name")),
            email=_text(payload.get("email")),
            message=_text(payload.get("message")),
            date=_text(payload.get("date")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email, "message": self.message, "date": self.date}
