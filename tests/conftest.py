"""Shared pytest fixtures for CLI, adapter and module-entry tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English (``config_cli_context``,
``header_cli_context``) so tests state what they need, not how it is built.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from librope.adapters.memory.header import HeaderWriterSpy
    from librope.composition import AppServices

_COVERAGE_BASENAME = ".coverage.librope"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete the coverage database and SQLite sidecars left by a crashed run."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before pytest-cov creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load the project ``.env`` file when one exists."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(**overrides: Any) -> Callable[[], AppServices]:
    """Return a factory yielding production services with ``overrides`` swapped in."""
    from librope.composition import build_production

    services = replace(build_production(), **overrides)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when parsing output (JSON, greetings) so log lines
    written to stderr cannot contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the ``build_production`` factory for CLI invocations.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from librope.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before, not after: a test may monkeypatch ``get_config`` and
    lose its ``cache_clear`` attribute.
    """
    from librope.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O.

    Example:
        def test_build_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"build": {"signal": "shared"}})
            assert config.get("build.signal") == "shared"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a services-factory builder whose get_config records ``profile``.

    Example:
        def test_profile_passed(cli_runner, config_factory, inject_config_with_profile_capture) -> None:
            captured: list[str | None] = []
            factory = inject_config_with_profile_capture(config_factory({}), captured)
            cli_runner.invoke(cli, ["--profile", "staging", "config"], obj=factory)
            assert captured == ["staging"]
    """

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        return _services_with(get_config=_capturing_get_config)

    return _inject


@pytest.fixture
def inject_deploy_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Path, list[str | None]], Callable[[], AppServices]]:
    """Return a services-factory builder whose deploy records ``profile``.

    The fake deploy always reports ``deployed_path`` as written.
    """

    def _inject(deployed_path: Path, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_deploy(
            *,
            targets: Any,
            force: bool = False,
            profile: str | None = None,
            set_permissions: bool = True,
            dir_mode: int | None = None,
            file_mode: int | None = None,
        ) -> list[Path]:
            captured_profiles.append(profile)
            return [deployed_path]

        return _services_with(deploy_configuration=_capturing_deploy)

    return _inject


@pytest.fixture
def inject_deploy_configuration() -> Callable[[Callable[..., list[Path]]], Callable[[], AppServices]]:
    """Return a services-factory builder with a custom deploy_configuration."""

    def _inject(deploy_fn: Callable[..., list[Path]]) -> Callable[[], AppServices]:
        return _services_with(deploy_configuration=deploy_fn)

    return _inject


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Example:
        def test_visibility(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"build": {"signal": "shared", "platform": "windows"}})
            result = cli_runner.invoke(cli, ["visibility"], obj=factory)
            assert "import" in result.stdout
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return _services_with(get_config=_fake_get_config)

    return _create


@dataclass
class HeaderCliContext:
    """Services factory plus the spy capturing export-header writes.

    Attributes:
        factory: Callable returning wired AppServices for CLI invocation.
        spy: HeaderWriterSpy for asserting on header writes.
    """

    factory: Callable[[], Any]
    spy: HeaderWriterSpy


@pytest.fixture
def header_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], HeaderCliContext]:
    """Create a CLI test context whose header writer is an in-memory spy.

    Example:
        def test_export_header(cli_runner, header_cli_context) -> None:
            ctx = header_cli_context({"build": {"macro_prefix": "ROPE"}})
            result = cli_runner.invoke(cli, ["export-header", "--destination", "x.hxx"], obj=ctx.factory)
            assert ctx.spy.calls[0]["prefix"] == "ROPE"
    """
    from librope.adapters.memory import HeaderWriterSpy as HeaderWriterSpyImpl

    def _create(config_data: dict[str, Any]) -> HeaderCliContext:
        spy = HeaderWriterSpyImpl()
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        factory = _services_with(get_config=_fake_get_config, write_export_header=spy.write_export_header)
        return HeaderCliContext(factory=factory, spy=spy)

    return _create
