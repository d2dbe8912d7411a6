#!/usr/bin/env python3
"""
02_config_lookup.py - Read nested configuration

Demonstrates: ConfigView path, item and attribute lookups, and KeyNotSetError
"""
from coreapp import ConfigView, KeyNotSetError

# Normally parsed from a per-environment config file by the host.
RAW_CONFIG = {
    "db": {
        "databases": {
            "testdb": {
                "dsn": "mysql:host=127.0.0.1;dbname=testdb;charset=latin1",
                "username": "root",
                "password": "",
                "options": {"timeout": 5},
            },
        },
    },
}


def main() -> None:
    config = ConfigView(RAW_CONFIG)

    print(config.get("db", "databases", "testdb", "dsn"))
    print(config["db"]["databases"]["testdb"]["username"])

    testdb = config.db.databases.testdb
    print(f"Options: {testdb.options.to_dict()}")

    try:
        config.db.cache
    except KeyNotSetError as e:
        print(f"Optional section skipped: {e}")


if __name__ == "__main__":
    main()
