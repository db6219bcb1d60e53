"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from abroad_budget.config import settings
from abroad_budget.infrastructure.clients.remote_predictor import RemotePredictorClient
from abroad_budget.infrastructure.clients.image_search import UniversityImageClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_remote_predictor() -> RemotePredictorClient | None:
    """Provide the remote procedure client when the remote backend is configured"""
    if settings.prediction_backend == "remote":
        return RemotePredictorClient()
    return None


def get_image_client() -> UniversityImageClient:
    """Provide university image search client instance"""
    return UniversityImageClient()
