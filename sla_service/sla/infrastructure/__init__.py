"""
SLA Infrastructure Layer
=========================

Infrastructure implementations for the SLA calculator:
- Providers: YAML-backed tier table and working calendar
"""

from sla_service.sla.infrastructure.providers import YAMLConfigProvider

__all__ = [
    "YAMLConfigProvider",
]
