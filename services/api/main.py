"""
FastAPI Movie Catalog API Service
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Depends, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse

from shared import Category, CatalogQuery, Movie, MoviePage, load_config
from shared.database import Database
from shared.repositories import MovieRepository
from api.services import CatalogService


config = load_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.app.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Startup
    logger.info("🚀 Starting Movie Catalog API...")

    # A failed connection aborts startup, nothing is served without a database
    await app.state.database.connect()

    logger.info(f"✅ The server is live on port {config.app.port}")

    yield

    # Shutdown
    logger.info("🛑 Shutting down Movie Catalog API...")
    await app.state.database.disconnect()
    logger.info("✅ Graceful shutdown completed")


# Create FastAPI app
app = FastAPI(
    title="Movie Catalog API",
    description="Read-only API for browsing and searching the movie catalog",
    version=config.app.version,
    lifespan=lifespan,
    # Off in production so these paths stay available as slugs
    docs_url="/docs" if config.app.debug else None,
    redoc_url=None,
    openapi_url="/openapi.json" if config.app.debug else None,
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.app.cors_origin],
    allow_methods=["GET", "HEAD"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

# Initialize services
app.state.database = Database(config.database)


def get_catalog_service() -> CatalogService:
    """Dependency injection for catalog service"""
    return CatalogService(repository=MovieRepository(app.state.database))


@app.api_route(
    "/",
    methods=["GET", "HEAD"],
    response_model=MoviePage,
    response_model_exclude_unset=True,
)
async def list_movies(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Movies per page, defaults to 20"),
    search: str = Query("", description="Case-insensitive title search"),
    catalog_service: CatalogService = Depends(get_catalog_service)
):
    """List movies, newest first, with pagination and optional title search"""
    query = CatalogQuery(page=page, limit=limit, search=search)
    try:
        return await catalog_service.list_movies(query)

    except Exception as e:
        logger.error(f"Error fetching movies: {str(e)}")
        return PlainTextResponse("An error occurred while fetching movies.", status_code=500)


@app.api_route(
    "/category/{category}",
    methods=["GET", "HEAD"],
    response_model=MoviePage,
    response_model_exclude_unset=True,
)
async def list_movies_by_category(
    category: str,
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Movies per page, defaults to 20"),
    search: str = Query("", description="Case-insensitive title search"),
    catalog_service: CatalogService = Depends(get_catalog_service)
):
    """
    List movies in one category with pagination and optional title search

    Unknown categories redirect to the full listing.
    """
    allowed = Category.parse(category)
    if allowed is None:
        logger.warning(f"Invalid category: {category}")
        return RedirectResponse("/", status_code=302)

    query = CatalogQuery(page=page, limit=limit, search=search)
    try:
        return await catalog_service.list_movies(query, category=allowed)

    except Exception as e:
        logger.error(f"Error fetching movies by category {category}: {str(e)}")
        return PlainTextResponse("An error occurred while fetching movies by category.", status_code=500)


@app.api_route(
    "/{slug}",
    methods=["GET", "HEAD"],
    response_model=Movie,
    response_model_exclude_unset=True,
)
async def get_movie(
    slug: str,
    catalog_service: CatalogService = Depends(get_catalog_service)
):
    """Get a specific movie by slug"""
    try:
        movie = await catalog_service.get_movie_by_slug(slug)

    except Exception as e:
        logger.error(f"Error fetching movie {slug}: {str(e)}")
        return PlainTextResponse("An error occurred while fetching the movie.", status_code=500)

    if movie is None:
        logger.warning(f"Movie not found: {slug}")
        return PlainTextResponse("Movie not found.", status_code=404)
    return movie


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return PlainTextResponse("Internal server error", status_code=500)


def run():
    """Console entry point"""
    uvicorn.run(
        "api.main:app",
        host=config.app.host,
        port=config.app.port,
        log_level=config.app.log_level.lower(),
        reload=config.app.debug
    )


if __name__ == "__main__":
    run()
