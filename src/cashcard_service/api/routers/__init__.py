"""
cashcard_service.api.routers

HTTP routers: the owner-scoped `/cashcards` resource and health probes.
"""

# Package marker.
