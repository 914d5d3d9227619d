"""
HTTP API for the movie catalog
"""
