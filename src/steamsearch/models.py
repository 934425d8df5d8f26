"""Data models for Steam storefront API responses."""

from __future__ import annotations

from dataclasses import dataclass, field


def _int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str(data: dict, key: str) -> str:
    """String field; missing or null reads as "". Raises ValueError on other types."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} should be a string, got {type(value).__name__}")
    return value


def _list(data: dict, key: str, item_type: type) -> tuple:
    """List field; missing or null reads as (). Raises ValueError on other types."""
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"{key} should be a list, got {type(value).__name__}")
    for item in value:
        # bool is an int subclass but never a valid id
        if not isinstance(item, item_type) or isinstance(item, bool):
            raise ValueError(f"{key} should hold {item_type.__name__} items, got {item!r}")
    return tuple(value)


def _app_id(value) -> str:
    # The search endpoint sends app ids as strings; older payloads used numbers
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"appid should be a string or integer, got {type(value).__name__}")
    return str(value)


def _obj(value) -> dict:
    return value if isinstance(value, dict) else {}


def _objs(value) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


@dataclass(frozen=True)
class SearchResult:
    """A single candidate from the app search endpoint."""

    app_id: str
    name: str
    icon_url: str = ""
    logo_url: str = ""

    @classmethod
    def from_dict(cls, item: dict) -> SearchResult:
        return cls(
            app_id=_app_id(item.get("appid")),
            name=_str(item, "name"),
            icon_url=_str(item, "icon"),
            logo_url=_str(item, "logo"),
        )


@dataclass(frozen=True)
class ReviewSummary:
    """Aggregate review statistics (the ``query_summary`` block)."""

    num_reviews: int = 0
    review_score: int = 0
    review_score_desc: str = ""
    total_positive: int = 0
    total_negative: int = 0
    total_reviews: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> ReviewSummary:
        return cls(
            num_reviews=_int(data.get("num_reviews")),
            review_score=_int(data.get("review_score")),
            review_score_desc=_str(data, "review_score_desc"),
            total_positive=_int(data.get("total_positive")),
            total_negative=_int(data.get("total_negative")),
            total_reviews=_int(data.get("total_reviews")),
        )


@dataclass(frozen=True)
class ReviewInfo:
    """Envelope returned by the app reviews endpoint."""

    success: int = 0
    query_summary: ReviewSummary = field(default_factory=ReviewSummary)


@dataclass(frozen=True)
class Platforms:
    windows: bool = False
    mac: bool = False
    linux: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> Platforms:
        return cls(
            windows=bool(data.get("windows", False)),
            mac=bool(data.get("mac", False)),
            linux=bool(data.get("linux", False)),
        )

    def names(self) -> list[str]:
        return [n for n in ("windows", "mac", "linux") if getattr(self, n)]


@dataclass(frozen=True)
class Category:
    id: str = ""
    description: str = ""


@dataclass(frozen=True)
class Achievement:
    name: str = ""
    path: str = ""


@dataclass(frozen=True)
class Achievements:
    total: int = 0
    highlighted: tuple[Achievement, ...] = ()


@dataclass(frozen=True)
class ReleaseDate:
    coming_soon: bool = False
    date: str = ""


@dataclass(frozen=True)
class SupportInfo:
    url: str = ""
    email: str = ""


@dataclass(frozen=True)
class ContentDescriptors:
    """Sensitive-content flags. Id 3 marks adult sexual content."""

    ids: tuple[int, ...] = ()
    notes: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> ContentDescriptors:
        return cls(
            ids=_list(data, "ids", int),
            notes=_str(data, "notes"),
        )


@dataclass(frozen=True)
class AppData:
    """Descriptive fields of an application. Every field is optional upstream."""

    type: str = ""
    name: str = ""
    steam_appid: int = 0
    required_age: int = 0
    is_free: bool = False
    dlc: tuple[int, ...] = ()
    detailed_description: str = ""
    about_the_game: str = ""
    short_description: str = ""
    supported_languages: str = ""
    header_image: str = ""
    capsule_image: str = ""
    capsule_imagev5: str = ""
    website: str = ""
    developers: tuple[str, ...] = ()
    publishers: tuple[str, ...] = ()
    platforms: Platforms = field(default_factory=Platforms)
    categories: tuple[Category, ...] = ()
    genres: tuple[Category, ...] = ()
    achievements: Achievements = field(default_factory=Achievements)
    release_date: ReleaseDate = field(default_factory=ReleaseDate)
    support_info: SupportInfo = field(default_factory=SupportInfo)
    content_descriptors: ContentDescriptors = field(default_factory=ContentDescriptors)

    @property
    def content_descriptor_ids(self) -> tuple[int, ...]:
        return self.content_descriptors.ids

    @classmethod
    def from_dict(cls, data: dict) -> AppData:
        achievements = _obj(data.get("achievements"))
        release = _obj(data.get("release_date"))
        support = _obj(data.get("support_info"))
        return cls(
            type=_str(data, "type"),
            name=_str(data, "name"),
            steam_appid=_int(data.get("steam_appid")),
            # required_age is sometimes sent as a string
            required_age=_int(data.get("required_age")),
            is_free=bool(data.get("is_free", False)),
            dlc=_list(data, "dlc", int),
            detailed_description=_str(data, "detailed_description"),
            about_the_game=_str(data, "about_the_game"),
            short_description=_str(data, "short_description"),
            supported_languages=_str(data, "supported_languages"),
            header_image=_str(data, "header_image"),
            capsule_image=_str(data, "capsule_image"),
            capsule_imagev5=_str(data, "capsule_imagev5"),
            website=_str(data, "website"),
            developers=_list(data, "developers", str),
            publishers=_list(data, "publishers", str),
            platforms=Platforms.from_dict(_obj(data.get("platforms"))),
            categories=tuple(
                Category(id=str(c.get("id", "")), description=_str(c, "description"))
                for c in _objs(data.get("categories"))
            ),
            genres=tuple(
                Category(id=str(g.get("id", "")), description=_str(g, "description"))
                for g in _objs(data.get("genres"))
            ),
            achievements=Achievements(
                total=_int(achievements.get("total")),
                highlighted=tuple(
                    Achievement(name=_str(a, "name"), path=_str(a, "path"))
                    for a in _objs(achievements.get("highlighted"))
                ),
            ),
            release_date=ReleaseDate(
                coming_soon=bool(release.get("coming_soon", False)),
                date=_str(release, "date"),
            ),
            support_info=SupportInfo(
                url=_str(support, "url"),
                email=_str(support, "email"),
            ),
            content_descriptors=ContentDescriptors.from_dict(
                _obj(data.get("content_descriptors"))
            ),
        )


@dataclass(frozen=True)
class AppDetails:
    """One entry of the app details response."""

    success: bool = False
    data: AppData = field(default_factory=AppData)

    @property
    def content_descriptor_ids(self) -> tuple[int, ...]:
        return self.data.content_descriptor_ids

    @classmethod
    def from_dict(cls, entry: dict) -> AppDetails:
        # Unknown ids come back as {"success": false} with no data, or "data": []
        return cls(
            success=bool(entry.get("success", False)),
            data=AppData.from_dict(_obj(entry.get("data"))),
        )


def parse_search_results(payload) -> list[SearchResult]:
    """Parse the search endpoint body. Raises ValueError on an unexpected shape."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array of apps, got {type(payload).__name__}")
    results = []
    for item in payload:
        if not isinstance(item, dict):
            raise ValueError(f"expected an app object, got {type(item).__name__}")
        results.append(SearchResult.from_dict(item))
    return results


def parse_review_info(payload) -> ReviewInfo:
    """Parse the reviews endpoint body. Raises ValueError on an unexpected shape."""
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    summary = payload.get("query_summary") or {}
    if not isinstance(summary, dict):
        raise ValueError("query_summary is not an object")
    return ReviewInfo(
        success=_int(payload.get("success")),
        query_summary=ReviewSummary.from_dict(summary),
    )


def parse_app_details_response(payload) -> dict[str, AppDetails]:
    """Parse the details endpoint body into an ordered ``app id -> AppDetails`` mapping.

    Entries keep the order the storefront sent them in. Raises ValueError on an
    unexpected shape.
    """
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object keyed by app id, got {type(payload).__name__}")
    details: dict[str, AppDetails] = {}
    for app_id, entry in payload.items():
        if not isinstance(entry, dict):
            raise ValueError(f"details for app {app_id} is not an object")
        details[str(app_id)] = AppDetails.from_dict(entry)
    return details
