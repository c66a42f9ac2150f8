import io

import pytest

from contestkit.abc160 import main, shortest_tour


def test_sample():
    assert shortest_tour(20, [5, 10, 15]) == 10


def test_result_is_perimeter_minus_widest_gap():
    k = 30
    a = [1, 4, 20, 25]
    gaps = [3, 16, 5, k - 25 + 1]
    assert shortest_tour(k, a) == k - max(gaps)


def test_rotation_invariance():
    k = 40
    a = [2, 9, 17, 31]
    shifted = sorted((x + 5) % k for x in a)
    assert shortest_tour(k, a) == shortest_tour(k, shifted)


def test_empty_is_rejected():
    with pytest.raises(ValueError):
        shortest_tour(10, [])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("20 3\n5 10 15\n"))
    main([])
    assert capsys.readouterr().out == "10\n"