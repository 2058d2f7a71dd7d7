"""
Default construction of discoverers.

Host applications that keep their classes in the configured source tree can
call get_discoverer() and start chaining without further setup.
"""

from pathlib import Path

from class_discovery.application.discoverer import Discoverer
from class_discovery.domain.exceptions import ConfigurationError
from class_discovery.domain.ports import DirectoryWalker, TypeRegistry
from class_discovery.shared.infrastructure.config import Settings, settings


def make_discoverer(
    config: Settings | None = None,
    walker: DirectoryWalker | None = None,
    registry: TypeRegistry | None = None,
) -> Discoverer:
    """
    Build a Discoverer from settings.

    Args:
        config: Settings to read (defaults to the global settings)
        walker: Optional directory walker override
        registry: Optional type registry override

    Raises:
        ConfigurationError: If the configured root is not absolute
    """
    config = config or settings
    root = config.resolved_root()

    if not Path(root).is_absolute():
        raise ConfigurationError(
            f"Discovery root must be an absolute path, got {root!r}",
            context={"root": root},
        )

    discoverer = Discoverer(root, config.path, config.namespace, walker=walker, registry=registry)

    if config.recursive:
        discoverer.recursively()

    return discoverer


def get_discoverer() -> Discoverer:
    """Fresh discoverer for the default source tree; never shared between callers."""
    return make_discoverer()
