"""``[lib_log_rich]`` parsing into the runtime configuration.

``init_logging`` itself runs through the CLI tests in test_cli_core.py.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from librope import __init__conf__
from librope.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_unknown_keys_pass_through() -> None:
    parsed = LoggingConfigModel.model_validate({"service": "rope", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "rope"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_empty_section_uses_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_service_defaults_to_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_configured_environment_is_used() -> None:
    runtime_config = _build_runtime_config(Config({"lib_log_rich": {"service": "rope", "environment": "ci"}}, {}))

    assert runtime_config.service == "rope"
    assert runtime_config.environment == "ci"
