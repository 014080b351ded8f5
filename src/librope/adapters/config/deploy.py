"""Deploy the bundled default configuration to app/host/user layers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from librope import __init__conf__
from librope.adapters.config.loader import get_default_config_path, validate_profile
from librope.domain.enums import DeployTarget

_DEPLOYED_ACTIONS = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    r"""Copy ``defaultconfig.toml`` into the requested configuration layers.

    Gives users an editable ``[build]`` section in the standard location
    instead of hunting for platform-specific paths. Linux user layer:
    ``~/.config/librope/config.toml``; with a profile
    ``~/.config/librope/profile/<name>/config.toml``.

    Args:
        targets: Layers to deploy to (app, host, user).
        force: Overwrite existing files instead of skipping them.
        profile: Optional profile subdirectory.
        set_permissions: Apply layer permission modes on POSIX systems.
        dir_mode: Directory mode override for all targets.
        file_mode: File mode override for all targets.

    Returns:
        Paths that were created or overwritten, including ``.d`` companions.
        Empty when every target already exists and ``force`` is False.

    Raises:
        PermissionError: Deploying to app/host without sufficient privileges.
        ValueError: Invalid profile name.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[t.value for t in targets],
        force=force,
        set_permissions=set_permissions,
        dir_mode=dir_mode,
        file_mode=file_mode,
    )

    paths: list[Path] = []
    for result in results:
        if result.action in _DEPLOYED_ACTIONS:
            paths.append(result.destination)
        paths.extend(
            dot_d_result.destination
            for dot_d_result in result.dot_d_results
            if dot_d_result.action in _DEPLOYED_ACTIONS
        )
    return paths


__all__ = [
    "deploy_configuration",
]
