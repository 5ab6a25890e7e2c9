"""Root conftest — shared test configuration."""

import os

# Ensure tests never hit a real mail provider
os.environ.setdefault("MAIL_BACKEND", "log")
os.environ.setdefault("MAIL_API_KEY", "mail-test-fake-key")
