"""Console script entry point for ``librope``.

Lives at package level so the production wiring from :mod:`.composition`
reaches the CLI adapter without the adapter importing composition itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``librope`` command with production services."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
