"""Layered config loading: bundled defaults, the environment layer, caching, concurrency."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from librope.adapters.config.build import load_build_settings
from librope.adapters.config.loader import get_config, get_default_config_path
from librope.domain.enums import BuildSignal, PlatformSelection


@pytest.mark.os_agnostic
class TestDefaultConfigPath:
    def test_points_at_the_bundled_toml(self) -> None:
        path = get_default_config_path()

        assert path.name == "defaultconfig.toml"
        assert path.is_file()

    def test_bundled_file_carries_the_build_section(self) -> None:
        assert "[build]" in get_default_config_path().read_text(encoding="utf-8")


@pytest.mark.os_agnostic
class TestGetConfig:
    def test_defaults_include_a_parseable_build_section(self, clear_config_cache: None) -> None:
        settings = load_build_settings(get_config())

        assert settings.macro_prefix.isupper()

    def test_repeated_calls_hit_the_cache(self, clear_config_cache: None) -> None:
        assert get_config() is get_config()

    def test_cache_clear_forces_a_reload(self, clear_config_cache: None) -> None:
        first = get_config()
        get_config.cache_clear()

        second = get_config()

        assert first is not second
        assert first.as_dict() == second.as_dict()


@pytest.mark.os_agnostic
class TestConcurrentAccess:
    def test_threads_see_equivalent_config(self, clear_config_cache: None) -> None:
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = [f.result() for f in [pool.submit(get_config) for _ in range(10)]]

        first = results[0].as_dict()
        assert all(r.as_dict() == first for r in results)

    def test_cache_clear_during_reads_does_not_fail(self, clear_config_cache: None) -> None:
        errors: list[Exception] = []

        def fetch() -> None:
            try:
                load_build_settings(get_config())
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

        def clear() -> None:
            try:
                get_config.cache_clear()
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures: list[Future[None]] = [pool.submit(clear if i % 5 == 0 else fetch) for i in range(20)]
            for future in futures:
                future.result()

        assert errors == []


@pytest.mark.os_agnostic
class TestEnvironmentLayer:
    def test_documented_variable_sets_the_build_signal(
        self, monkeypatch: pytest.MonkeyPatch, clear_config_cache: None
    ) -> None:
        monkeypatch.setenv("LIBROPE___BUILD__SIGNAL", "shared")
        get_config.cache_clear()
        try:
            settings = load_build_settings(get_config())
        finally:
            get_config.cache_clear()

        assert settings.signal is BuildSignal.SHARED

    def test_documented_variable_sets_the_platform(
        self, monkeypatch: pytest.MonkeyPatch, clear_config_cache: None
    ) -> None:
        monkeypatch.setenv("LIBROPE___BUILD__PLATFORM", "windows")
        get_config.cache_clear()
        try:
            settings = load_build_settings(get_config())
        finally:
            get_config.cache_clear()

        assert settings.platform is PlatformSelection.WINDOWS

    def test_bundled_defaults_document_the_working_prefix(self) -> None:
        text = get_default_config_path().read_text(encoding="utf-8")

        assert "LIBROPE___BUILD__SIGNAL" in text
        assert "LIBROPE_BUILD__SIGNAL" not in text
