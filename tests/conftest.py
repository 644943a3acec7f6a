"""Root conftest — shared test configuration."""

import os

# Tests build Settings explicitly; a developer's shell must not leak into defaults
for _var in (
    "API_KEY", "API_KEY_HEADER", "AUTH_BYPASS_PREFIXES", "SEED_USERS",
    "DOCS_ENABLED", "LOG_LEVEL", "LOG_FORMAT",
):
    os.environ.pop(_var, None)
