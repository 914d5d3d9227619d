"""
Business logic service layer
"""
import logging
from typing import Optional

from shared import Category, CatalogQuery, Movie, MovieFilter, MoviePage
from shared.repositories import MovieRepository

logger = logging.getLogger(__name__)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show `total` items, `limit` per page"""
    if limit <= 0:
        raise ValueError("limit must be positive")
    return -(-total // limit)


class CatalogService:
    """Movie catalog business logic service"""

    def __init__(self, repository: MovieRepository):
        self.repository = repository

    async def list_movies(self, query: CatalogQuery, category: Optional[Category] = None) -> MoviePage:
        """List one page of movies, optionally narrowed to a category"""
        movie_filter = MovieFilter(search=query.search or None, category=category)

        movies, total = await self.repository.find_movies(
            movie_filter.to_query(), skip=query.skip, limit=query.limit
        )
        logger.debug(f"Fetched {len(movies)}/{total} movies (page {query.page}, category {category})")

        return MoviePage(
            movies=movies,
            page=query.page,
            total_pages=total_pages(total, query.limit),
        )

    async def get_movie_by_slug(self, slug: str) -> Optional[Movie]:
        """Get a single movie by its slug"""
        return await self.repository.get_movie_by_slug(slug)
