"""
Book Catalog Package

Books, authors and genres with deduplicated authors and genres, guarded
deletes and per-kind search.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- exceptions.py: Catalog error hierarchy
- store.py: Query layer over the SQLAlchemy session
- models/: SQLAlchemy ORM models
- services/: Resolvers, referential guard, search dispatcher, book lifecycle
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- dependencies.py: Dependency injection functions
- main.py: FastAPI application factory
- utils/: Text helpers
"""

__version__ = "0.1.0"
