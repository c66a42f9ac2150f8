import io
from itertools import combinations

import pytest

from contestkit.abc353 import (
    MOD,
    effect_as_x,
    effect_as_y,
    exp_count_maps,
    main,
    solve_concat_sum,
    sum_mod_pairs,
)


def test_sum_mod_pairs_sample():
    assert sum_mod_pairs([3, 50000001, 50000002]) == 100000012


def test_sum_mod_pairs_small_values_need_no_reduction():
    a = [1, 2, 3, 4, 5]
    assert sum_mod_pairs(a) == sum(x + y for x, y in combinations(a, 2))


def test_sum_mod_pairs_order_independent():
    a = [99999999, 50000000, 1, 50000000, 7]
    assert sum_mod_pairs(a) == sum_mod_pairs(sorted(a, reverse=True))


def test_sum_mod_pairs_single_element():
    assert sum_mod_pairs([12345]) == 0


def test_sum_mod_pairs_empty_raises():
    with pytest.raises(ValueError):
        sum_mod_pairs([])


def test_exp_count_maps_example():
    a = [17, 1, 100, 1000000000, 999]
    maps = exp_count_maps(a)
    expected = {
        (0, 0): 1,
        (0, 2): 2,
        (0, 9): 1,
        (1, 2): 2,
        (1, 9): 1,
        (2, 2): 1,
        (2, 9): 1,
        (3, 2): 1,
    }
    for i in range(len(a) - 1):
        for exp in range(10):
            assert maps[i][exp] == expected.get((i, exp), 0)


def test_exp_count_maps_last_is_all_zero():
    maps = exp_count_maps([17, 1, 100])
    assert len(maps) == 3
    assert all(v == 0 for v in maps[-1].values())


def test_exp_count_maps_rejects_non_positive():
    with pytest.raises(ValueError):
        exp_count_maps([1, 0])


def test_effect_as_x_example():
    counts = {0: 1, 1: 0, 2: 2, 3: 0, 4: 0, 5: 0, 6: 0, 7: 0, 8: 0, 9: 1}
    assert effect_as_x(17, counts) == (170 + 17000 * 2 + 170000000000) % MOD


def test_effect_as_y_is_multiple_of_index():
    assert effect_as_y(0, 123) == 0
    assert effect_as_y(3, 5) == 15


def test_solve_example():
    assert solve_concat_sum([1001, 5, 1000000, 1000000000, 100000]) == 625549048


def test_solve_min():
    assert solve_concat_sum([1, 1]) == 11


def test_solve_max():
    assert solve_concat_sum([1000000000] * (2 * 10**5)) == 871346439


def test_main_task_d(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1\n"))
    main(["d"])
    assert capsys.readouterr().out.strip() == "11"