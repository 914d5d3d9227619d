"""
Shared data models for the movie catalog
"""
import re
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

# Optional sign and leading digits, trailing text is ignored
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


class Category(str, Enum):
    """Catalog category whitelist"""
    AMZN_PRIME_VIDEO = "amzn-prime-video"
    DISNEY_HOTSTAR = "disney-hotstar"
    SONY_LIVE = "sony-live"
    ZEE5 = "zee5"
    JIOCINEMA = "jiocinema"
    HOICHOI = "hoichoi"
    ALT = "alt"
    BENGALI = "bengali"
    GUJARATI = "gujarati"
    PUNJABI = "punjabi"
    MARATHI = "marathi"
    HINDI_DUBBED_MOVIES = "hindi-dubbed-movies"
    HOLLYWOOD_HINDI_DUBBED = "hollywood-hindi-dubbed"
    SOUTH_HINDI_DUBBED = "south-hindi-dubbed"
    BOLLYWOOD_MOVIES = "bollywood-movies"
    WEB_SERIES = "web-series"
    DUAL_AUDIO_MOVIES = "dual-audio-movies"
    NETFLIX = "netflix"

    @classmethod
    def parse(cls, value: str) -> Optional["Category"]:
        """Return the matching category, or None when it is not whitelisted"""
        try:
            return cls(value)
        except ValueError:
            return None


def parse_positive_int(value: Any, default: int) -> int:
    """Leniently coerce a query value, falling back to the default"""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    if not isinstance(value, str):
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    number = int(match.group(1))
    return number if number > 0 else default


class Movie(BaseModel):
    """Movie record as stored in the catalog

    Only the fields the API queries on are declared. Everything else in the
    document is kept as extra data and returned untouched.
    """
    object_id: Any = Field(None, alias="_id")
    uid: Any = None
    title: Any = None
    slug: Any = None
    categories: Any = None

    model_config = ConfigDict(extra="allow")


class CatalogQuery(BaseModel):
    """Listing query parameters"""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str = ""

    @field_validator("page", mode="before")
    @classmethod
    def lenient_page(cls, v):
        return parse_positive_int(v, DEFAULT_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def lenient_limit(cls, v):
        return parse_positive_int(v, DEFAULT_LIMIT)

    @field_validator("search", mode="before")
    @classmethod
    def empty_search(cls, v):
        return v or ""

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class MovieFilter(BaseModel):
    """Structured catalog filter, rendered to a MongoDB query document"""
    search: Optional[str] = None
    category: Optional[Category] = None

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        if self.category is not None:
            # Array membership, exact tag
            query["categories"] = self.category.value
        if self.search:
            query["title"] = {"$regex": re.escape(self.search), "$options": "i"}
        return query


class MoviePage(BaseModel):
    """API response for a page of movies"""
    movies: List[Movie]
    page: int
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)
