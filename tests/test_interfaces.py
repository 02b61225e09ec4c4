"""Tests for interfaces-config."""

import json

from keagen.interfaces import InterfacesConfig


def test_interfaces_empty():
    """Test that a config without interfaces is empty."""
    config = InterfacesConfig()
    assert config.is_empty()
    assert config.interfaces == []


def test_interfaces_keep_order():
    """Test that interface names are kept in the given order."""
    config = InterfacesConfig(interfaces=["eth1", "eth0"])
    assert not config.is_empty()
    assert config.interfaces == ["eth1", "eth0"]


def test_interfaces_to_dict():
    """Test serializing interfaces-config."""
    assert InterfacesConfig(interfaces=["eth0", "eth1"]).to_dict() == {
        "interfaces": ["eth0", "eth1"]
    }
    assert InterfacesConfig().to_dict() == {"interfaces": []}


def test_interfaces_to_json():
    """Test rendering interfaces-config as JSON."""
    data = json.loads(InterfacesConfig(interfaces=["enp0s1"]).to_json())
    assert data == {"interfaces": ["enp0s1"]}
