"""
SLA Interfaces Layer
====================

Interface adapters (controllers) for the SLA calculator module.

This is the outermost layer - handles HTTP requests/responses and
delegates to application services.
"""

from sla_service.sla.interfaces.controllers import sla_router, get_sla_service

__all__ = ["sla_router", "get_sla_service"]
