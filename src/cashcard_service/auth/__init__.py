"""
cashcard_service.auth

Authentication/authorization package.

Responsibilities:
- Fixed credential store (bcrypt-hashed principals).
- FastAPI auth dependencies (HTTP Basic -> Principal, role gate).
"""

# Package marker.
