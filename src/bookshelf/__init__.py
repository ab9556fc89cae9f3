"""Bookshelf GraphQL service.

An in-memory book and author catalog exposed as a GraphQL API over FastAPI,
together with an HTTP client and a command line interface.
"""

__version__ = "0.1.0"
