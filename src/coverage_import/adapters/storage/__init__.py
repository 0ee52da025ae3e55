"""Storage adapters for persisted configuration files."""

from coverage_import.adapters.storage.toml_config_store import TomlConfigStore, check_input_exists

__all__ = ["TomlConfigStore", "check_input_exists"]
