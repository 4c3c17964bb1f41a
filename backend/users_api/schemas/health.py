"""
Users API - Health Schemas
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Static liveness status"""
    status: str
    service: str
    timestamp: str
