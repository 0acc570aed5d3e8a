"""Generator configuration: GeneratorConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from propgen._logging import bind_seed, configure_logging
from propgen.sampling import seeded_sampler, set_sampler

__all__ = [
    'GeneratorConfig',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for propgen.

    Attributes:
        seed: Seed of the process-wide sampler. None = unseeded `random.random`.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = not configured.
    """

    seed: int | None = None
    log_level: str | None = None


# Global configuration (set by init())
_config: GeneratorConfig | None = None


def _detect_seed() -> int | None:
    """Read the seed from the PROPGEN_SEED environment variable."""
    raw = os.environ.get('PROPGEN_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logging.warning("Invalid PROPGEN_SEED value '%s', ignoring", raw)
        return None


def _detect_log_level() -> str | None:
    """Read the log level from the PROPGEN_LOG_LEVEL environment variable."""
    raw = os.environ.get('PROPGEN_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    seed: int | None = None,
    log_level: str | None = None,
) -> GeneratorConfig:
    """Initialize propgen with the specified configuration.

    Args:
        seed: Seed for the process-wide sampler. Read from PROPGEN_SEED if None.
        log_level: Logging level. Read from PROPGEN_LOG_LEVEL if None.

    Returns:
        The GeneratorConfig that was set.

    Example:
        ```python
        import propgen

        # Reproducible draws for every generator without an explicit sampler
        propgen.init(seed=1234, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_seed = seed if seed is not None else _detect_seed()
    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = GeneratorConfig(seed=resolved_seed, log_level=resolved_level)

    if resolved_seed is None:
        set_sampler(None)
    else:
        set_sampler(seeded_sampler(resolved_seed))
    bind_seed(resolved_seed)

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> GeneratorConfig:
    """Get the current configuration.

    Returns:
        The current GeneratorConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'propgen not initialized. Call propgen.init() first.'
        raise RuntimeError(msg)
    return _config


def _reset() -> None:
    """Forget the current configuration and restore the default sampler."""
    global _config  # noqa: PLW0603
    _config = None
    set_sampler(None)
    bind_seed(None)
