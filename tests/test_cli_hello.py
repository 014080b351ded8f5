"""``hello`` and ``info`` commands: greeting on stdout, empty names rejected, metadata."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from librope import __init__conf__
from librope.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_hello_greets_the_sample_string(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", "I am a string!"], obj=production_factory)

    assert result.exit_code == 0
    assert "Hello, I am a string!!\n" in result.stdout


@pytest.mark.os_agnostic
def test_hello_keeps_whitespace_names(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", " "], obj=production_factory)

    assert result.exit_code == 0
    assert "Hello,  !" in result.stdout


@pytest.mark.os_agnostic
def test_hello_with_empty_name_reports_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello", ""], obj=production_factory)

    assert result.exit_code == 22
    assert "Error: name must not be empty" in result.stderr
    assert "Hello" not in result.stdout


@pytest.mark.os_agnostic
def test_hello_without_name_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["hello"], obj=production_factory)

    assert result.exit_code == 2
    assert "Missing argument" in result.output


@pytest.mark.os_agnostic
def test_hello_output_is_identical_across_runs(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    first = cli_runner.invoke(cli_mod.cli, ["hello", "rope"], obj=production_factory)
    second = cli_runner.invoke(cli_mod.cli, ["hello", "rope"], obj=production_factory)

    assert first.stdout == second.stdout


@pytest.mark.os_agnostic
def test_info_prints_the_package_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.stdout
    assert __init__conf__.version in result.stdout
