from abroad_budget.domain.models import PredictionRequest
from abroad_budget.domain.prediction import base_cost


def test_base_cost_worked_example():
    def request(levels, months, local_trips, intl_trips, city_id="atlantis"):
        acc, dining, night, act, shop = levels
        return PredictionRequest(city_id, "", months, acc, dining, night, act, shop, local_trips, intl_trips)
    assert base_cost(request((3, 3, 3, 3, 3), 6, 2, 1)) == 36900
    assert base_cost(request((3, 3, 3, 3, 3), 6, 2, 1, city_id="london")) == 47970
    assert base_cost(request((1, 1, 1, 1, 1), 1, 0, 0)) == 2000
    assert base_cost(request((5, 5, 5, 5, 5), 1, 0, 0)) == 10000
    assert base_cost(request((5, 1, 1, 1, 1), 1, 0, 0)) == 2000 + 3200
