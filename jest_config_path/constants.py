"""Constants for jest-config-path."""

VERSION = "0.1.0"

JEST_CONFIG_BASE_NAME = "jest.config"
PACKAGE_JSON = "package.json"
PACKAGE_JSON_JEST_KEY = "jest"

# Supported config extensions, highest priority first
JEST_CONFIG_EXT_ORDER: tuple[str, ...] = (".js", ".mjs", ".cjs", ".json", ".ts")
