"""
Shared Kernel Module
====================

Generic infrastructure used by the SLA module and the application shell:
structured logging and HTTP middleware.

DO NOT add SLA business logic to the shared kernel.
"""
