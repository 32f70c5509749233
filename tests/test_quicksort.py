import os
import random
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from algorithms import quicksort


@pytest.mark.parametrize('items', [
    [],
    [1],
    [3, 1, 2],
    [5, 5, 5, 1],
    list(range(20, 0, -1)),
])
def test_sorts_small_inputs(items):
    assert quicksort(items) == sorted(items)


def test_does_not_modify_input():
    items = [4, 2, 9, 1]
    quicksort(items)
    assert items == [4, 2, 9, 1]


def test_key_orders_by_weight_then_handle():
    weights = {0: 4.0, 1: 8.0, 2: 5.0, 3: 5.0}
    assert quicksort([3, 1, 0, 2], key=lambda e: (weights[e], e)) == [0, 2, 3, 1]


def test_long_sorted_input_does_not_recurse():
    items = list(range(2000))
    assert quicksort(items) == items


def test_random_floats():
    rng = random.Random(0)
    items = [rng.uniform(-100, 100) for _ in range(500)]
    assert quicksort(items) == sorted(items)
