"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def sample_config_json():
    """Return a sample valid S3 configuration string."""
    return """
{
    "version": 1,
    "type": "s3",
    "timeout": "30s",
    "sub": {
        "access_key_id": "test_id",
        "secret_access_key": "test_secret",
        "region": "us-west-2",
        "bucket": "test_bucket",
        "path": "test/path"
    }
}
"""


@pytest.fixture
def env_config_json():
    """Return an S3 configuration that takes credentials from the environment."""
    return """
{
    "version": 1,
    "type": "s3",
    "continue_on_failure": true,
    "sub": {
        "access_key_id": "$TEST_ACCESS_KEY_ID",
        "secret_access_key": "${TEST_SECRET_ACCESS_KEY}",
        "region": "us-west-2",
        "bucket": "test_bucket",
        "path": "test/path"
    }
}
"""


@pytest.fixture
def config_file(tmp_config_dir, sample_config_json):
    """Create a temporary config file with sample content."""
    config_path = tmp_config_dir / "restore.json"
    config_path.write_text(sample_config_json)
    return config_path


@pytest.fixture
def env_config_file(tmp_config_dir, env_config_json, monkeypatch):
    """Create a config file referencing environment variables, and set them."""
    monkeypatch.setenv("TEST_ACCESS_KEY_ID", "env_id")
    monkeypatch.setenv("TEST_SECRET_ACCESS_KEY", "env_secret")
    config_path = tmp_config_dir / "env.json"
    config_path.write_text(env_config_json)
    return config_path
