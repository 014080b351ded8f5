"""Domain enum tests: member values, derived properties, member counts."""

from __future__ import annotations

import pytest

from librope.domain.enums import (
    Annotation,
    BuildRole,
    BuildSignal,
    DeployTarget,
    HeaderAction,
    LinkageMode,
    OutputFormat,
    PlatformSelection,
    TargetPlatform,
)

# ======================== BuildSignal ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("signal", "linkage", "role", "suffix"),
    [
        (BuildSignal.STATIC, LinkageMode.STATIC, BuildRole.CONSUMING, "STATIC"),
        (BuildSignal.STATIC_BUILD, LinkageMode.STATIC, BuildRole.BUILDING, "STATIC_BUILD"),
        (BuildSignal.SHARED, LinkageMode.SHARED, BuildRole.CONSUMING, "SHARED"),
        (BuildSignal.SHARED_BUILD, LinkageMode.SHARED, BuildRole.BUILDING, "SHARED_BUILD"),
    ],
)
def test_build_signal_maps_to_linkage_role_and_macro(
    signal: BuildSignal, linkage: LinkageMode, role: BuildRole, suffix: str
) -> None:
    assert signal.linkage is linkage
    assert signal.role is role
    assert signal.macro_suffix == suffix


@pytest.mark.os_agnostic
def test_build_signal_declaration_order_is_priority_order() -> None:
    assert [s.value for s in BuildSignal] == ["static", "static-build", "shared", "shared-build"]


# ======================== Annotation ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "spelling"),
    [
        (Annotation.NONE, ""),
        (Annotation.IMPORT, "__declspec(dllimport)"),
        (Annotation.EXPORT, "__declspec(dllexport)"),
    ],
)
def test_annotation_declspec_spelling(member: Annotation, spelling: str) -> None:
    assert member.declspec == spelling


# ======================== Plain value enums ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_str"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
        (DeployTarget.APP, "app"),
        (DeployTarget.HOST, "host"),
        (DeployTarget.USER, "user"),
        (TargetPlatform.WINDOWS, "windows"),
        (TargetPlatform.OTHER, "other"),
        (PlatformSelection.AUTO, "auto"),
        (HeaderAction.DRIFT, "drift"),
    ],
)
def test_members_compare_equal_to_their_strings(member: str, expected_str: str) -> None:
    assert member == expected_str


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("enum_type", "count"),
    [
        (LinkageMode, 2),
        (BuildRole, 2),
        (TargetPlatform, 2),
        (PlatformSelection, 3),
        (Annotation, 3),
        (BuildSignal, 4),
        (HeaderAction, 5),
        (OutputFormat, 2),
        (DeployTarget, 3),
    ],
)
def test_enum_member_counts(enum_type: type, count: int) -> None:
    assert len(list(enum_type)) == count  # type: ignore[arg-type]
