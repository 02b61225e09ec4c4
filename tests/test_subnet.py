"""Tests for subnet4 configuration."""

import pytest

from keagen.subnet import Pool, Subnet4, format_pool_range


def test_format_pool_range():
    """Test the pool range descriptor format."""
    assert format_pool_range("10.0.0.1", "10.0.0.9") == "10.0.0.1 - 10.0.0.9"


def test_pool_to_dict():
    """Test serializing a pool."""
    assert Pool(range="10.0.0.1 - 10.0.0.9").to_dict() == {"pool": "10.0.0.1 - 10.0.0.9"}


def test_add_config_allocates_increasing_ids():
    """Test that subnet identifiers start at 1 and increase by one."""
    subnet4 = Subnet4()
    assert subnet4.is_empty()
    assert subnet4.next_id == 1

    ids = [subnet4.add_config(f"10.{i}.0.0/16") for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert subnet4.next_id == 6
    assert len(subnet4) == 5
    assert not subnet4.is_empty()

    entry = subnet4.get(2)
    assert entry.id == 2
    assert entry.subnet == "10.1.0.0/16"
    assert entry.pools == []


def test_add_pool_for_cfg():
    """Test adding pools to a subnet."""
    subnet4 = Subnet4()
    subnet_id = subnet4.add_config("192.168.1.0/24")

    assert subnet4.add_pool_for_cfg(subnet_id, "192.168.1.50", "192.168.1.60")
    assert subnet4.add_pool_for_cfg(subnet_id, "192.168.1.10", "192.168.1.20")

    ranges = [pool.range for pool in subnet4.get(subnet_id).pools]
    assert ranges == ["192.168.1.10 - 192.168.1.20", "192.168.1.50 - 192.168.1.60"]


def test_add_pool_twice_is_not_duplicated():
    """Test that an identical pool is only stored once."""
    subnet4 = Subnet4()
    subnet_id = subnet4.add_config("192.168.1.0/24")

    assert subnet4.add_pool_for_cfg(subnet_id, "192.168.1.10", "192.168.1.20")
    assert subnet4.add_pool_for_cfg(subnet_id, "192.168.1.10", "192.168.1.20")
    assert len(subnet4.get(subnet_id).pools) == 1


def test_add_pool_for_unknown_subnet():
    """Test that adding a pool to an unknown subnet fails without changes."""
    subnet4 = Subnet4()
    subnet_id = subnet4.add_config("192.168.1.0/24")
    before = subnet4.to_dict()

    assert not subnet4.add_pool_for_cfg(99, "10.0.0.1", "10.0.0.9")
    assert not subnet4.add_pool_for_cfg(0, "10.0.0.1", "10.0.0.9")
    assert subnet4.to_dict() == before
    assert subnet4.get(99) is None
    assert subnet4.get(subnet_id).pools == []

    empty = Subnet4()
    assert not empty.add_pool_for_cfg(1, "10.0.0.1", "10.0.0.9")
    assert empty.is_empty()


def test_subnet4_to_dict():
    """Test serializing subnet4 as a list ordered by identifier."""
    subnet4 = Subnet4()
    assert subnet4.to_dict() == []

    first = subnet4.add_config("192.168.1.0/24")
    second = subnet4.add_config("10.0.0.0/8")
    subnet4.add_pool_for_cfg(second, "10.0.0.100", "10.0.0.200")
    subnet4.add_pool_for_cfg(first, "192.168.1.100", "192.168.1.200")
    subnet4.add_pool_for_cfg(first, "192.168.1.10", "192.168.1.20")

    assert subnet4.to_dict() == [
        {
            "id": 1,
            "subnet": "192.168.1.0/24",
            "pools": [
                {"pool": "192.168.1.10 - 192.168.1.20"},
                {"pool": "192.168.1.100 - 192.168.1.200"},
            ],
        },
        {
            "id": 2,
            "subnet": "10.0.0.0/8",
            "pools": [{"pool": "10.0.0.100 - 10.0.0.200"}],
        },
    ]


def test_next_id_cannot_be_reset():
    """Test that the identifier counter cannot be rewound to replace a subnet."""
    subnet4 = Subnet4()
    first = subnet4.add_config("10.0.0.0/24")
    subnet4.add_pool_for_cfg(first, "10.0.0.10", "10.0.0.20")

    with pytest.raises((AttributeError, ValueError)):
        subnet4.next_id = 1

    second = subnet4.add_config("10.1.0.0/24")
    assert (first, second) == (1, 2)
    assert subnet4.to_dict() == [
        {"id": 1, "subnet": "10.0.0.0/24", "pools": [{"pool": "10.0.0.10 - 10.0.0.20"}]},
        {"id": 2, "subnet": "10.1.0.0/24", "pools": []},
    ]
