"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from abroad_budget.api.main import create_app
from abroad_budget.domain.models import HistoricalReport, PredictionRequest


@pytest.fixture
def app():
    """FastAPI app with default (local) dependencies"""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def typical_request() -> PredictionRequest:
    """Six months, mid-range lifestyle, two local trips and one abroad"""
    return PredictionRequest(
        city_id="lyon",
        university_id="ESSCA Lyon",
        duration_months=6,
        accommodation_level=3,
        dining_level=3,
        nightlife_level=3,
        activities_level=3,
        shopping_level=3,
        local_trips=2,
        international_trips=1,
    )


@pytest.fixture
def matching_report() -> HistoricalReport:
    """Report identical to typical_request except for its cost"""
    return HistoricalReport(
        city_id="lyon",
        university_id="ESSCA Lyon",
        duration_months=6,
        accommodation_level=3,
        dining_level=3,
        nightlife_level=3,
        activities_level=3,
        shopping_level=3,
        local_trips=2,
        international_trips=1,
        total_cost=12000,
    )
