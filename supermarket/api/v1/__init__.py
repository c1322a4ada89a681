"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Ping and health check endpoints
- items: Produce catalog items

==============================================================================
"""

from . import health, items

__all__ = ["health", "items"]
