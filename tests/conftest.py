"""Shared pytest configuration."""

import os

# Rich sizes the CLI console at import time; use a wide terminal so
# CliRunner output is not line-wrapped in the middle of messages.
os.environ["COLUMNS"] = "200"
