"""
FastAPI feedback service.

Provides REST API for feedback triage:
- POST /feedback/add - Submit and score feedback
- POST /feedback/update/{id} - Change status
- GET /feedback/all, GET /feedback/{id}, DELETE /feedback/{id}
- GET /stats - Aggregate counts
- GET /health, GET /health/ready - Probes
"""

from voltstream.api.app import create_app
