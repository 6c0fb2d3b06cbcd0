"""
cashcard_service.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, paging types and repositories.
"""

# Package marker.
