from fastapi import FastAPI
from pydantic import BaseModel

from abroad_budget.domain.models import PredictionRequest
from abroad_budget.domain.prediction import predict_cost

app = FastAPI(title="Mock Cost RPC Server", version="1.0.0")


class CostParams(BaseModel):
    p_city_id: str
    p_duration_months: int
    p_accommodation_level: int
    p_dining_level: int
    p_nightlife_level: int
    p_activities_level: int
    p_shopping_level: int
    p_local_trips: int
    p_international_trips: int


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/rest/v1/rpc/calculate_predicted_cost")
def calculate_predicted_cost(params: CostParams) -> int:
    # The procedure is not keyed by university
    return predict_cost(
        PredictionRequest(
            city_id=params.p_city_id,
            university_id="",
            duration_months=params.p_duration_months,
            accommodation_level=params.p_accommodation_level,
            dining_level=params.p_dining_level,
            nightlife_level=params.p_nightlife_level,
            activities_level=params.p_activities_level,
            shopping_level=params.p_shopping_level,
            local_trips=params.p_local_trips,
            international_trips=params.p_international_trips,
        )
    )
