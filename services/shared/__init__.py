"""
Shared modules for the movie catalog service
"""
from .models import Category, CatalogQuery, Movie, MovieFilter, MoviePage
from .config import Config, load_config

__all__ = ["Category", "CatalogQuery", "Movie", "MovieFilter", "MoviePage", "Config", "load_config"]
