import math
from itertools import accumulate

import pytest

from algobox.dp import (
    BILLIARDS_MOD,
    MOD,
    billiards_ways,
    coin_change_ways,
    count_non_decreasing_subarrays,
    dice_combinations,
    elevator_times,
    frog_min_cost,
    grid_paths,
    knapsack_max_value,
    knapsack_max_value_light,
    longest_path,
    not_alone,
    vacation,
)


def test_dice_zero_has_one_way():
    assert dice_combinations(0) == 1


@pytest.mark.parametrize("n", range(1, 7))
def test_dice_small_sums_are_powers_of_two(n):
    assert dice_combinations(n) == 2 ** (n - 1)


def test_dice_result_is_reduced():
    assert 0 <= dice_combinations(1000) < MOD


def test_dice_negative_rejected():
    with pytest.raises(ValueError):
        dice_combinations(-1)


def test_frog_single_stone():
    assert frog_min_cost([7]) == 0


def test_frog_flat_path_costs_nothing():
    assert frog_min_cost([4, 4, 4, 4, 4], k=3) == 0


@pytest.mark.parametrize("k", [1, 2, 3])
def test_frog_monotone_heights_cost_total_rise(k):
    heights = [1, 3, 4, 8, 9, 15]
    assert frog_min_cost(heights, k) == heights[-1] - heights[0]


def test_frog_long_jump_reaches_direct_cost():
    heights = [10, 30, 40, 20, 50, 12]
    assert frog_min_cost(heights, k=len(heights)) == abs(heights[-1] - heights[0])


def test_frog_larger_k_never_worse():
    heights = [10, 30, 40, 20, 50, 12, 33]
    costs = [frog_min_cost(heights, k) for k in range(1, 6)]
    assert costs == sorted(costs, reverse=True)


def test_frog_rejects_bad_input():
    with pytest.raises(ValueError):
        frog_min_cost([])
    with pytest.raises(ValueError):
        frog_min_cost([1, 2], k=0)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4), (3, 5)])
def test_grid_open_counts_binomial(rows, cols):
    grid = ["." * cols] * rows
    assert grid_paths(grid) == math.comb(rows + cols - 2, rows - 1)


def test_grid_blocked_row_has_no_path():
    assert grid_paths(["..", "##", ".."]) == 0


def test_grid_destination_wall_ignored():
    assert grid_paths(["...", "...", "..#"]) == grid_paths(["...", "...", "..."])


def test_grid_rejects_ragged():
    with pytest.raises(ValueError):
        grid_paths(["...", ".."])


def test_knapsack_everything_fits():
    items = [(1, 5), (2, 7), (3, 1)]
    assert knapsack_max_value(items, 100) == 13
    assert knapsack_max_value_light(items, 100) == 13


def test_knapsack_zero_capacity():
    assert knapsack_max_value([(1, 5)], 0) == 0
    assert knapsack_max_value_light([(1, 5)], 0) == 0


@pytest.mark.parametrize(
    "items,capacity",
    [
        ([(3, 30), (4, 50), (5, 60)], 8),
        ([(6, 5), (5, 6), (6, 4), (6, 6), (3, 5), (7, 2)], 15),
        ([(2, 3), (2, 3), (5, 9)], 4),
        ([(10, 1)], 5),
    ],
)
def test_knapsack_variants_agree(items, capacity):
    assert knapsack_max_value(items, capacity) == knapsack_max_value_light(items, capacity)


def test_knapsack_negative_capacity_rejected():
    with pytest.raises(ValueError):
        knapsack_max_value([(1, 1)], -1)
    with pytest.raises(ValueError):
        knapsack_max_value_light([(1, 1)], -1)


def test_longest_path_chain():
    n = 6
    assert longest_path(n, [(i, i + 1) for i in range(1, n)]) == n - 1


def test_longest_path_no_edges():
    assert longest_path(4, []) == 0


def test_longest_path_cycle_rejected():
    with pytest.raises(ValueError):
        longest_path(3, [(1, 2), (2, 3), (3, 1)])


def test_vacation_empty():
    assert vacation([]) == 0


def test_vacation_single_day_takes_best():
    assert vacation([(10, 40, 70)]) == 70


def test_vacation_bounded_by_daily_maxima():
    days = [(10, 40, 70), (20, 50, 80), (30, 60, 90)]
    result = vacation(days)
    assert result <= sum(max(day) for day in days)
    assert result >= max(sum(day[i] for day in days[::2]) for i in range(3))


def test_vacation_rejects_wrong_width():
    with pytest.raises(ValueError):
        vacation([(1, 2)])


def test_not_alone_equal_values():
    assert not_alone([5, 5, 5, 5, 5]) == 0


def test_not_alone_pair():
    assert not_alone([3, 9]) == abs(3 - 9)


def test_not_alone_triple():
    values = [4, 10, 1]
    assert not_alone(values) == max(values) - min(values)


def test_not_alone_rotation_invariant():
    values = [1, 8, 2, 9, 3, 7, 4]
    results = {not_alone(values[s:] + values[:s]) for s in range(len(values))}
    assert len(results) == 1


def test_not_alone_too_short():
    with pytest.raises(ValueError):
        not_alone([1])


def test_coin_change_zero_total():
    assert coin_change_ways(0, [2, 3]) == 1


def test_coin_change_single_unit_coin():
    assert coin_change_ways(17, [1]) == 1


@pytest.mark.parametrize("total", range(0, 12))
def test_coin_change_ones_and_twos(total):
    assert coin_change_ways(total, [1, 2]) == total // 2 + 1


def test_coin_change_order_irrelevant():
    assert coin_change_ways(30, [2, 5, 3, 6]) == coin_change_ways(30, [6, 3, 5, 2])


def test_coin_change_rejects_bad_input():
    with pytest.raises(ValueError):
        coin_change_ways(5, [0, 1])
    with pytest.raises(ValueError):
        coin_change_ways(-1, [1])


def test_billiards_start_values():
    assert [billiards_ways(x) for x in range(4)] == [1, 0, 1, 1]


def test_billiards_recurrence_holds():
    values = [billiards_ways(x) for x in range(200)]
    assert all(values[i] == (values[i - 2] + values[i - 3]) % BILLIARDS_MOD for i in range(4, 200))


def test_billiards_negative_rejected():
    with pytest.raises(ValueError):
        billiards_ways(-3)


def test_count_subarrays_empty():
    assert count_non_decreasing_subarrays([]) == 0


def test_count_subarrays_increasing():
    values = list(range(8))
    assert count_non_decreasing_subarrays(values) == math.comb(len(values) + 1, 2)


def test_count_subarrays_decreasing():
    values = list(range(8, 0, -1))
    assert count_non_decreasing_subarrays(values) == len(values)


def test_elevator_without_useful_lift_follows_stairs():
    stairs = [7, 6, 18, 6, 16, 18]
    elevator = [10**6] * len(stairs)
    assert elevator_times(stairs, elevator, 2) == [0, *accumulate(stairs)]


def test_elevator_times_shape_and_order():
    stairs = [7, 6, 18, 6, 16, 18, 1, 17, 17]
    elevator = [6, 9, 3, 10, 9, 1, 10, 1, 5]
    times = elevator_times(stairs, elevator, 2)
    assert len(times) == len(stairs) + 1
    assert times[0] == 0
    assert times == sorted(times)


def test_elevator_mismatch_rejected():
    with pytest.raises(ValueError):
        elevator_times([1, 2], [1], 3)