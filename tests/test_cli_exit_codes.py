"""Exit code integration tests: every error path maps to its ExitCode."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from librope.adapters import cli as cli_mod
from librope.adapters.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from conftest import HeaderCliContext


def _failing_deploy(error: Exception) -> Callable[..., list[Path]]:
    def _deploy(
        *,
        targets: Any,
        force: bool = False,
        profile: str | None = None,
        set_permissions: bool = True,
        dir_mode: int | None = None,
        file_mode: int | None = None,
    ) -> list[Path]:
        raise error

    return _deploy


@pytest.mark.os_agnostic
def test_exit_code_values_are_stable() -> None:
    assert int(ExitCode.SUCCESS) == 0
    assert int(ExitCode.GENERAL_ERROR) == 1
    assert int(ExitCode.HEADER_DRIFT) == 3
    assert int(ExitCode.PERMISSION_DENIED) == 13
    assert int(ExitCode.INVALID_ARGUMENT) == 22
    assert int(ExitCode.CONFIG_ERROR) == 78


@pytest.mark.os_agnostic
def test_no_exit_code_collides_with_click_usage_errors() -> None:
    assert 2 not in {int(code) for code in ExitCode}


@pytest.mark.os_agnostic
def test_when_config_section_is_invalid_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_deploy_has_permission_error_it_exits_with_code_13(
    cli_runner: CliRunner,
    inject_deploy_configuration: Callable[[Callable[..., list[Path]]], Callable[[], Any]],
) -> None:
    factory = inject_deploy_configuration(_failing_deploy(PermissionError("Permission denied")))

    result: Result = cli_runner.invoke(cli_mod.cli, ["config-deploy", "--target", "app"], obj=factory)

    assert result.exit_code == ExitCode.PERMISSION_DENIED
    assert "Permission denied" in result.stderr


@pytest.mark.os_agnostic
def test_when_config_deploy_has_generic_error_it_exits_with_code_1(
    cli_runner: CliRunner,
    inject_deploy_configuration: Callable[[Callable[..., list[Path]]], Callable[[], Any]],
) -> None:
    factory = inject_deploy_configuration(_failing_deploy(OSError("Disk full")))

    result: Result = cli_runner.invoke(cli_mod.cli, ["config-deploy", "--target", "user"], obj=factory)

    assert result.exit_code == ExitCode.GENERAL_ERROR
    assert "Disk full" in result.stderr


@pytest.mark.os_agnostic
def test_when_hello_name_is_empty_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", ""], obj=production_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "must not be empty" in result.stderr
    assert "Hello" not in result.stdout


@pytest.mark.os_agnostic
def test_when_build_signal_is_unknown_visibility_exits_with_code_78(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"build": {"signal": "dynamic"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["visibility"], obj=factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid [build] configuration" in result.stderr


@pytest.mark.os_agnostic
def test_when_configured_prefix_is_invalid_export_header_exits_with_code_78(
    cli_runner: CliRunner,
    header_cli_context: Callable[[dict[str, Any]], HeaderCliContext],
) -> None:
    ctx = header_cli_context({"build": {"macro_prefix": "lower"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["export-header", "--destination", "x.hxx"], obj=ctx.factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert ctx.spy.calls == []


@pytest.mark.os_agnostic
def test_when_prefix_option_is_invalid_export_header_exits_with_code_22(
    cli_runner: CliRunner,
    header_cli_context: Callable[[dict[str, Any]], HeaderCliContext],
) -> None:
    ctx = header_cli_context({})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["export-header", "--destination", "x.hxx", "--prefix", "lib-rope"], obj=ctx.factory
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "invalid macro prefix" in result.stderr


@pytest.mark.os_agnostic
def test_when_header_check_finds_drift_it_exits_with_code_3(
    cli_runner: CliRunner,
    header_cli_context: Callable[[dict[str, Any]], HeaderCliContext],
) -> None:
    ctx = header_cli_context({})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["export-header", "--destination", "x.hxx", "--check"], obj=ctx.factory
    )

    assert result.exit_code == ExitCode.HEADER_DRIFT
    assert "out of date" in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (PermissionError("read-only"), ExitCode.PERMISSION_DENIED),
        (IsADirectoryError("is a directory"), ExitCode.GENERAL_ERROR),
    ],
)
def test_when_header_write_fails_it_maps_os_errors(
    cli_runner: CliRunner,
    header_cli_context: Callable[[dict[str, Any]], HeaderCliContext],
    error: OSError,
    expected: ExitCode,
) -> None:
    ctx = header_cli_context({})
    ctx.spy.raise_exception = error

    result: Result = cli_runner.invoke(cli_mod.cli, ["export-header", "--destination", "x.hxx"], obj=ctx.factory)

    assert result.exit_code == expected
    assert str(error) in result.stderr
