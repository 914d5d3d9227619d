"""
Data repository layer
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId

from shared.database import Database
from shared.models import Movie

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the movie collection cannot be queried"""


def _to_json_value(value: Any) -> Any:
    """Render BSON-only values the way the catalog has always returned them"""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    if isinstance(value, dict):
        return {k: _to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


class MovieRepository:
    """Read-only movie data repository"""

    def __init__(self, database: Database):
        self.database = database

    async def find_movies(
        self, query_filter: Dict[str, Any], skip: int, limit: int
    ) -> Tuple[List[Movie], int]:
        """Return one page of movies, newest uid first, and the total match count"""
        try:
            collection = self.database.get_collection()

            cursor = collection.find(query_filter).sort("uid", -1).skip(skip).limit(limit)
            documents = await cursor.to_list(length=limit)

            total = await collection.count_documents(query_filter)

            return [self._document_to_movie(doc) for doc in documents], total

        except Exception as e:
            logger.error(f"Error searching movies with filter {query_filter}: {str(e)}", exc_info=True)
            raise StoreError("movie search failed") from e

    async def get_movie_by_slug(self, slug: str) -> Optional[Movie]:
        """Get movie by slug"""
        try:
            document = await self.database.get_collection().find_one({"slug": slug})
            return self._document_to_movie(document) if document else None

        except Exception as e:
            logger.error(f"Error fetching movie {slug}: {str(e)}", exc_info=True)
            raise StoreError("movie lookup failed") from e

    def _document_to_movie(self, document: Dict[str, Any]) -> Movie:
        """Convert a stored document to a Movie object"""
        return Movie.model_validate(_to_json_value(document))
