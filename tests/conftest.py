"""Root conftest: shared test configuration."""

import os

# Human-readable logs in test output; never pick up a developer's .env prefix
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("RESOURCE_PREFIX", "/resource")
