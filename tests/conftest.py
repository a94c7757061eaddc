"""Test configuration and fixtures."""

import os

import logfire

# Settings() in the DI container reads the environment
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)
