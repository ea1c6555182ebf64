"""Test fixtures for CloudDrive.

This package provides reusable test fixtures:
- entries: folder, file and store factories with sensible defaults
- api: TestClient and fresh drive session for API tests
"""
