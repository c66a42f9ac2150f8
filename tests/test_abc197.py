import io
from functools import reduce
from operator import or_, xor

import pytest

from contestkit.abc197 import main, min_xor_of_ors


def test_sample():
    assert min_xor_of_ors([1, 5, 7]) == 2


def test_single_element_is_itself():
    assert min_xor_of_ors([13]) == 13


@pytest.mark.parametrize("a", [[3, 6, 9], [1, 2, 4, 8], [7, 7, 1, 12, 5]])
def test_bounded_by_extreme_splits(a):
    result = min_xor_of_ors(a)
    assert result <= reduce(or_, a)
    assert result <= reduce(xor, a)


def test_empty_is_rejected():
    with pytest.raises(ValueError):
        min_xor_of_ors([])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 5 7\n"))
    main([])
    assert capsys.readouterr().out == "2\n"