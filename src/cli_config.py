"""CLI configuration overrides for runtime tunables.

Extracted from purlbom.py to keep the entrypoint slim. CLI flags have the
highest precedence over file and environment settings.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from config import MetadataConfig

logger = logging.getLogger(__name__)


def apply_cli_overrides(config: MetadataConfig, args) -> MetadataConfig:
    """Return ``config`` with CLI flags from ``args`` applied.

    Only flags the user actually set are applied; ``--debug`` can enable
    debug output but never disables a debug setting from file or environment.
    """
    updates = {}
    if getattr(args, "DEBUG", False):
        updates["debug"] = True
    timeout = getattr(args, "TIMEOUT", None)
    if timeout is not None:
        if timeout > 0:
            updates["timeout"] = float(timeout)
        else:
            logger.warning("Ignoring non-positive --timeout %s", timeout)
    return replace(config, **updates) if updates else config
