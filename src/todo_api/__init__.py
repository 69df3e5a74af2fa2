"""
Todo API package.

FastAPI service exposing CRUD operations over todo items stored in a
single-file SQLite database. The application instance lives in
``todo_api.main``; ``python -m todo_api`` starts the server.
"""

__version__ = "0.1.0"
