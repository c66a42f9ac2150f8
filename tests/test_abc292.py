import io
from math import isqrt

import pytest

from contestkit.abc292 import (
    card_queries,
    count_abcd,
    count_multi_pattern,
    is_component_balanced,
    main,
    shout,
)


def test_shout_upper_cases_lowercase_text():
    word = "contest"
    result = shout(word)
    assert result.isupper()
    assert result.lower() == word
    assert len(result) == len(word)


def test_card_queries_sample():
    queries = [(1, 1), (3, 1), (1, 1), (3, 1), (2, 2), (3, 2), (3, 3)]
    assert card_queries(3, queries) == [False, True, True, False]


def test_card_queries_without_questions_answer_nothing():
    assert card_queries(2, [(1, 1), (2, 2), (1, 2)]) == []


def test_card_queries_rejects_unknown_player():
    with pytest.raises(ValueError):
        card_queries(2, [(1, 3)])


def test_count_multi_pattern_parity_matches_squareness():
    for n in range(1, 60):
        is_square = isqrt(n) ** 2 == n
        assert (count_multi_pattern(n) % 2 == 1) == is_square


def test_count_multi_pattern_is_multiplicative_for_coprimes():
    assert count_multi_pattern(6) == count_multi_pattern(2) * count_multi_pattern(3)
    assert count_multi_pattern(35) == count_multi_pattern(5) * count_multi_pattern(7)


def test_count_multi_pattern_equal_for_primes():
    assert count_multi_pattern(7) == count_multi_pattern(13) == count_multi_pattern(2)


def test_count_abcd_sample():
    assert count_abcd(4) == 8


def test_count_abcd_matches_full_split_sum():
    for n in range(2, 40):
        expected = sum(
            count_multi_pattern(ab) * count_multi_pattern(n - ab) for ab in range(1, n)
        )
        assert count_abcd(n) == expected


def test_balanced_cycle():
    assert is_component_balanced(3, [(1, 2), (2, 3), (3, 1)])


def test_balanced_triangle_with_tail():
    assert is_component_balanced(4, [(1, 2), (2, 3), (3, 1), (1, 4)])


def test_unbalanced_when_edge_count_differs_from_vertex_count():
    assert not is_component_balanced(3, [(1, 2), (2, 3)])


def test_unbalanced_with_isolated_vertex():
    assert not is_component_balanced(4, [(1, 2), (2, 3), (3, 1), (1, 2)])


def test_balance_independent_of_edge_order():
    edges = [(1, 2), (2, 3), (3, 1), (1, 4)]
    assert is_component_balanced(4, edges) == is_component_balanced(4, edges[::-1])


def test_balance_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        is_component_balanced(2, [(1, 2), (2, 5)])


def test_main_task_c_prints_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    main(["c"])
    assert capsys.readouterr().out.strip() == str(count_abcd(4))


def test_main_task_b_prints_answers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n2 1\n3 1\n3 2\n"))
    main(["b"])
    expected = ["Yes" if x else "No" for x in card_queries(2, [(2, 1), (3, 1), (3, 2)])]
    assert capsys.readouterr().out.split() == expected