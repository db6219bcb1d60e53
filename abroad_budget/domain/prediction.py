"""Cost prediction engine - core business logic for budget estimates"""

import math
from typing import Mapping, Sequence, Tuple

from abroad_budget.domain.catalog import CITY_COST_MULTIPLIERS
from abroad_budget.domain.models import CostEstimate, HistoricalReport, PredictionRequest

# Seed data; a city with reports here is priced from them instead of the base formula
HISTORICAL_REPORTS: Tuple[HistoricalReport, ...] = (
    HistoricalReport(
        city_id="paris",
        university_id="sorbonne",
        duration_months=6,
        accommodation_level=4,
        dining_level=3,
        nightlife_level=4,
        activities_level=4,
        shopping_level=3,
        local_trips=2,
        international_trips=1,
        total_cost=15000,
    ),
)

BASE_MONTHLY_RATE = 2000

# Share of the monthly rate per lifestyle category; must sum to 1.0
ACCOMMODATION_SHARE = 0.4
DINING_SHARE = 0.2
NIGHTLIFE_SHARE = 0.1
ACTIVITIES_SHARE = 0.15
SHOPPING_SHARE = 0.15

LOCAL_TRIP_COST = 200
INTERNATIONAL_TRIP_COST = 500

LEVEL_PENALTY = 0.2
TRIP_PENALTY = 0.3
DURATION_PENALTY = 0.5


def round_half_up(value: float) -> int:
    """Nearest integer with .5 going up (not banker's rounding)"""
    return int(math.floor(value + 0.5))


def city_multiplier(city_id: str, multipliers: Mapping[str, float] = CITY_COST_MULTIPLIERS) -> float:
    return multipliers.get(city_id) or 1.0


def similarity_weight(report: HistoricalReport, request: PredictionRequest) -> float:
    """
    Weight in (0, 1] of a historical report relative to a request.

    1.0 means identical. Duration differences are penalized most (0.5 per
    month), trip count differences next (0.3 per trip) and lifestyle level
    differences least (0.2 per level step).
    """
    level_diff = (
        abs(report.accommodation_level - request.accommodation_level)
        + abs(report.dining_level - request.dining_level)
        + abs(report.nightlife_level - request.nightlife_level)
        + abs(report.activities_level - request.activities_level)
        + abs(report.shopping_level - request.shopping_level)
    )
    trip_diff = abs(report.local_trips - request.local_trips) + abs(
        report.international_trips - request.international_trips
    )
    duration_diff = abs(report.duration_months - request.duration_months)

    return 1 / (1 + level_diff * LEVEL_PENALTY + trip_diff * TRIP_PENALTY + duration_diff * DURATION_PENALTY)


def normalized_cost(report: HistoricalReport, request: PredictionRequest) -> float:
    """Scale a report's total linearly to the requested stay length"""
    return report.total_cost * (request.duration_months / report.duration_months)


def base_cost(request: PredictionRequest, multipliers: Mapping[str, float] = CITY_COST_MULTIPLIERS) -> int:
    """
    Closed-form estimate used when a city has no historical reports.

    monthly = 2000 * level * share, summed over the five categories,
    times the city multiplier. Trips are priced once for the whole stay
    (200 local, 500 international) and also scaled by the multiplier.
    """
    multiplier = city_multiplier(request.city_id, multipliers)

    accommodation_cost = BASE_MONTHLY_RATE * request.accommodation_level * ACCOMMODATION_SHARE
    dining_cost = BASE_MONTHLY_RATE * request.dining_level * DINING_SHARE
    nightlife_cost = BASE_MONTHLY_RATE * request.nightlife_level * NIGHTLIFE_SHARE
    activities_cost = BASE_MONTHLY_RATE * request.activities_level * ACTIVITIES_SHARE
    shopping_cost = BASE_MONTHLY_RATE * request.shopping_level * SHOPPING_SHARE

    monthly_total = (
        accommodation_cost + dining_cost + nightlife_cost + activities_cost + shopping_cost
    ) * multiplier

    trips_cost = (
        request.local_trips * LOCAL_TRIP_COST + request.international_trips * INTERNATIONAL_TRIP_COST
    ) * multiplier

    return round_half_up(monthly_total * request.duration_months + trips_cost)


def make_cost_estimate(
    request: PredictionRequest,
    reports: Sequence[HistoricalReport] = HISTORICAL_REPORTS,
    multipliers: Mapping[str, float] = CITY_COST_MULTIPLIERS,
) -> CostEstimate:
    """
    Main entry point: price a request and report which method was used.

    Reports for the same city are averaged, each normalized to the requested
    duration and weighted by similarity. Without any, falls back to the base
    formula.
    """
    # A report without a positive duration cannot be normalized
    city_reports = [
        report for report in reports if report.city_id == request.city_id and report.duration_months > 0
    ]

    if not city_reports:
        return CostEstimate(total_cost=base_cost(request, multipliers), basis="base", report_count=0)

    total_weight = 0.0
    weighted_cost = 0.0
    for report in city_reports:
        weight = similarity_weight(report, request)
        total_weight += weight
        weighted_cost += normalized_cost(report, request) * weight

    return CostEstimate(
        total_cost=round_half_up(weighted_cost / total_weight),
        basis="historical",
        report_count=len(city_reports),
    )


def predict_cost(
    request: PredictionRequest,
    reports: Sequence[HistoricalReport] = HISTORICAL_REPORTS,
    multipliers: Mapping[str, float] = CITY_COST_MULTIPLIERS,
) -> int:
    """Estimated total cost of the stay, in whole currency units"""
    return make_cost_estimate(request, reports, multipliers).total_cost
