"""Tests for the config module."""

import importlib
import os
from unittest.mock import mock_open, patch

from shell_split_mcp import config
from shell_split_mcp.config import INSTRUCTIONS, is_docker_environment


def test_is_docker_environment_dockerenv_exists():
    """Test Docker detection via .dockerenv file."""
    with patch("pathlib.Path.exists", return_value=True):
        assert is_docker_environment() is True


def test_is_docker_environment_cgroup_docker():
    """Test Docker detection via cgroup file containing 'docker'."""
    with patch("pathlib.Path.exists", return_value=False):
        with patch("builtins.open", mock_open(read_data="12:memory:/docker/abc123")):
            assert is_docker_environment() is True


def test_is_docker_environment_cgroup_containerd():
    """Test Docker detection via cgroup file containing 'containerd'."""
    with patch("pathlib.Path.exists", return_value=False):
        with patch("builtins.open", mock_open(read_data="12:memory:/containerd/abc123")):
            assert is_docker_environment() is True


def test_is_docker_environment_container_env_var():
    """Test Docker detection via container environment variable."""
    with patch("pathlib.Path.exists", return_value=False):
        with patch("builtins.open", side_effect=FileNotFoundError()):
            with patch.dict(os.environ, {"container": "docker"}):
                assert is_docker_environment() is True


def test_is_docker_environment_not_in_docker():
    """Test Docker detection when not running in Docker."""
    env_copy = os.environ.copy()
    env_copy.pop("container", None)
    with patch("pathlib.Path.exists", return_value=False):
        with patch("builtins.open", side_effect=FileNotFoundError()):
            with patch.dict(os.environ, env_copy, clear=True):
                assert is_docker_environment() is False


def test_limits_read_from_environment():
    """Test that limits, transport and binding come from environment variables."""
    env = {
        "SHELL_SPLIT_MAX_INPUT": "128",
        "SHELL_SPLIT_MAX_COMMANDS": "8",
        "SHELL_SPLIT_TRANSPORT": "streamable-http",
        "SHELL_SPLIT_HOST": "0.0.0.0",
        "SHELL_SPLIT_PORT": "9000",
    }
    try:
        with patch.dict(os.environ, env):
            importlib.reload(config)
            assert config.MAX_INPUT_SIZE == 128
            assert config.MAX_COMMANDS == 8
            assert config.TRANSPORT == "streamable-http"
            assert config.HOST == "0.0.0.0"
            assert config.PORT == 9000
    finally:
        importlib.reload(config)


def test_instructions_mention_tools():
    assert "shell_split" in INSTRUCTIONS
    assert "shell_tokens" in INSTRUCTIONS


def test_network_defaults():
    env_copy = {k: v for k, v in os.environ.items() if k not in ("SHELL_SPLIT_HOST", "SHELL_SPLIT_PORT")}
    try:
        with patch.dict(os.environ, env_copy, clear=True):
            importlib.reload(config)
            assert config.HOST is None
            assert config.PORT == 8000
    finally:
        importlib.reload(config)
