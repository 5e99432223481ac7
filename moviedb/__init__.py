"""
Movie Database Application Package.

This package contains the movie catalog data layer (schema, data-access
objects), library management, and the presentation-adjacent logic for
sorting, searching, validating and editing movies.
"""

__version__ = "1.1.0"
