"""
Serverless entry point for the SLA Calculator API
"""
import os

# Set environment variables for serverless
os.environ.setdefault("ENVIRONMENT", "production")

from mangum import Mangum
from sla_service.main import app

# Lambda handler for ASGI app (lifespan disabled; the SLA service is built on first request)
handler = Mangum(app, lifespan="off")
