"""
cashcard_service.services

Service layer package.

Responsibilities:
- Own the transaction boundary for each cash card operation.
"""

# Package marker.
