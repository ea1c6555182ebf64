"""Pytest configuration and shared fixtures."""

# Load CLOUDDRIVE_* variables from a local .env before any settings are built
from dotenv import load_dotenv
load_dotenv()

pytest_plugins = [
    "tests.fixtures.api",
]
