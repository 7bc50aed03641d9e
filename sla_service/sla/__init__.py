"""
SLA Calculator Module
=====================

Bounded context for SLA deadline and progress calculations.

Responsibilities:
- Resolve a ticket's SLA deadline from its tier code
- Break the SLA span down into worked hours per weekday
- Report progress towards the 50%, 75% and 100% milestones
- Expose the calculation over HTTP (POST /calculate-sla)
"""

__version__ = "1.0.0"
