from pathlib import Path

import pytest

from brand_dna.config import (
    DeploymentMode,
    ScrapeConfig,
    copy_default_config,
    default_config,
    detect_deployment_mode,
)


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({}, DeploymentMode.HOST),
        ({"VERCEL": "1"}, DeploymentMode.SERVERLESS),
        ({"AWS_LAMBDA_FUNCTION_VERSION": "$LATEST"}, DeploymentMode.SERVERLESS),
        ({"VERCEL": "1", "BRAND_DNA_MODE": "host"}, DeploymentMode.HOST),
        ({"BRAND_DNA_MODE": "Serverless"}, DeploymentMode.SERVERLESS),
    ],
)
def test_detect_deployment_mode(environ, expected):
    assert detect_deployment_mode(environ) is expected


def test_from_env_reads_paths():
    config = ScrapeConfig.from_env(
        {"BRAND_DNA_SCREENSHOT_DIR": "/srv/shots", "BRAND_DNA_CHROMIUM_PATH": "/opt/chromium"}
    )
    assert config.mode is DeploymentMode.HOST
    assert config.screenshot_dir == Path("/srv/shots")
    assert config.chromium_executable == "/opt/chromium"
    assert config.viewport == (1920, 1080)
    assert config.navigation_timeout == 30.0


def test_default_config_is_cached(monkeypatch):
    monkeypatch.delenv("BRAND_DNA_MODE", raising=False)
    monkeypatch.delenv("AWS_LAMBDA_FUNCTION_VERSION", raising=False)
    monkeypatch.delenv("VERCEL", raising=False)
    first = default_config()
    monkeypatch.setenv("VERCEL", "1")
    assert default_config() is first
    assert first.mode is DeploymentMode.HOST
    assert copy_default_config() is not first
