import pytest

from bulkrdns.engine import partition


def test_round_robin_assignment():
    items = ['a', 'b', 'c', 'd', 'e', 'f', 'g']
    parts = partition(items, 3)

    assert parts == [['a', 'd', 'g'], ['b', 'e'], ['c', 'f']]


@pytest.mark.parametrize("n", [0, 1, 2, 7, 64, 101])
@pytest.mark.parametrize("count", [1, 2, 3, 8, 16])
def test_every_item_assigned_exactly_once(n, count):
    items = [f"10.0.{i // 256}.{i % 256}" for i in range(n)]
    parts = partition(items, count)

    assert len(parts) == count
    flat = [item for part in parts for item in part]
    assert sorted(flat) == sorted(items)
    assert len(flat) == len(set(flat)) == n


def test_order_preserved_within_partition():
    items = [str(i) for i in range(20)]
    for part in partition(items, 6):
        assert part == sorted(part, key=int)


def test_fewer_items_than_partitions():
    parts = partition(['1.1.1.1', '8.8.8.8'], 5)

    assert parts == [['1.1.1.1'], ['8.8.8.8'], [], [], []]


def test_single_partition_keeps_input():
    items = ['3', '1', '2']
    assert partition(items, 1) == [items]


@pytest.mark.parametrize("count", [0, -1])
def test_invalid_count(count):
    with pytest.raises(ValueError):
        partition(['1.1.1.1'], count)
