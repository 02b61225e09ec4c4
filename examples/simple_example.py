#!/usr/bin/env python3
"""
Simple example demonstrating basic keagen usage.
"""

from keagen import Dhcp4, KeaConfig


def main():
    # Listen on one interface, keep leases for two hours
    dhcp4 = Dhcp4(7200, ["enp0s1"])

    # One subnet with a single pool
    subnet_id = dhcp4.subnet4.add_config("192.168.50.0/24")
    dhcp4.subnet4.add_pool_for_cfg(subnet_id, "192.168.50.10", "192.168.50.20")

    # Options handed to clients
    dhcp4.option_data.add_option_always("domain-name-servers", "192.168.50.1, 8.8.8.8")
    dhcp4.option_data.add_option("routers", "192.168.50.1", False)

    config = KeaConfig(dhcp4)
    print(config.to_json())


if __name__ == "__main__":
    main()
