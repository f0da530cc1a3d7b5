import numpy as np

from vrp_ranking.config.config import priority_scale
from vrp_ranking.config.enums import (
    F_NODE_I,
    F_VEH_C,
    F_VEH_I,
    NODE_PRIORITY,
    NODE_SERVICE,
    VEH_END,
    VEH_FIXED_COST,
    VEH_PER_HOUR,
    VEH_PER_KM,
    VEH_START,
)
from vrp_ranking.engine.cost_model import priority_sum_for_route, route_eval_for_vehicle
from vrp_ranking.engine.eval import Eval, total
from vrp_ranking.engine.routes import ArrayRoute, ListRoute, RouteLike, routes_from_arrays


def small_instance():
    dist = np.array(
        [
            [0, 1000, 2000],
            [1000, 0, 1500],
            [2000, 1500, 0],
        ],
        dtype=np.int64,
    )
    node_i = np.zeros((3, F_NODE_I), dtype=np.int64)
    node_i[:, NODE_PRIORITY] = [0, 3, 5]
    node_i[:, NODE_SERVICE] = [0, 60, 120]

    veh_i = np.zeros((2, F_VEH_I), dtype=np.int64)
    veh_i[1, VEH_END] = -1
    veh_c = np.zeros((2, F_VEH_C), dtype=np.int64)
    veh_c[0, VEH_FIXED_COST] = 10
    veh_c[0, VEH_PER_HOUR] = 3600
    veh_c[1, VEH_PER_KM] = 2
    return {
        "dist": dist,
        "ttime": dist // 10,
        "node_i": node_i,
        "veh_i": veh_i,
        "veh_c": veh_c,
        "duration_factor": 100,
        "cost_factor": 3600,
    }


def test_eval_addition_is_componentwise():
    a = Eval(1, 2, 3)
    b = Eval(10, 20, 30)
    assert a + b == Eval(11, 22, 33)
    assert a + Eval.zero() == a
    assert total([a, b, a]) == Eval(12, 24, 36)
    assert total([]) == Eval.zero()


def test_priority_sum_for_route():
    data = small_instance()
    assert priority_sum_for_route(data, ListRoute(0, [1, 2])) == 8
    assert priority_sum_for_route(data, ListRoute(0, [])) == 0


def test_route_eval_round_trip_with_fixed_and_hourly_cost():
    data = small_instance()
    ev = route_eval_for_vehicle(data, 0, ListRoute(0, [1, 2]))
    # 0 -> 1 -> 2 -> 0
    assert ev.distance == 4500
    assert ev.duration == (450 + 180) * 100
    assert ev.cost == 10 * 360_000 + 3600 * 450 * 100


def test_route_eval_open_route_per_km_cost():
    data = small_instance()
    ev = route_eval_for_vehicle(data, 1, ListRoute(1, [2]))
    # 0 -> 2, no return leg
    assert ev.distance == 2000
    assert ev.duration == (200 + 120) * 100
    assert ev.cost == 4 * 360_000


def test_empty_route_costs_nothing():
    data = small_instance()
    assert route_eval_for_vehicle(data, 0, ListRoute(0)) == Eval.zero()


def test_array_route_matches_list_route():
    data = small_instance()
    routes = np.array([[1, 2, 0], [2, 0, 0]], dtype=np.int64)
    lens = np.array([2, 1], dtype=np.int64)
    wrapped = routes_from_arrays(routes, lens)

    assert isinstance(wrapped[0], ArrayRoute)
    assert isinstance(wrapped[0], RouteLike)
    assert isinstance(ListRoute(0), RouteLike)
    assert len(wrapped[0]) == 2 and not wrapped[0].empty()
    np.testing.assert_array_equal(wrapped[1].route, [2])

    for r, route in enumerate(wrapped):
        listed = ListRoute(r, [int(j) for j in route.route])
        assert route_eval_for_vehicle(data, r, route) == route_eval_for_vehicle(data, r, listed)



def test_costs_follow_instance_scaling():
    data = small_instance()
    data["duration_factor"] = 10
    data["cost_factor"] = 60
    scale = priority_scale(data)
    assert scale == 600

    ev = route_eval_for_vehicle(data, 1, ListRoute(1, [2]))
    assert ev.duration == (200 + 120) * 10
    # 2 per km over 2 km is 4 user cost units
    assert ev.cost == 4 * scale

    ev = route_eval_for_vehicle(data, 0, ListRoute(0, [1]))
    assert ev.cost == 10 * scale + 3600 * 200 * 10
