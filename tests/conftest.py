"""
Pytest configuration for Prompt Enhancer tests.

Sets up test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def client():
    """FastAPI test client for the full app."""
    from fastapi.testclient import TestClient
    from prompt_enhancer.main import app

    return TestClient(app)


@pytest.fixture
def website_prompt() -> str:
    return "Create me a website"


@pytest.fixture
def backend_prompt() -> str:
    return "Build a backend API for user auth"


@pytest.fixture
def fullstack_prompt() -> str:
    return "I need a fullstack app with database"
