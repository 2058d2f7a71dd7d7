"""Candidate file enumeration for one discovery request."""

from collections.abc import Iterator
from pathlib import Path

from class_discovery.domain.models import SOURCE_GLOB, DiscoveryRequest
from class_discovery.domain.ports import DirectoryWalker


def enumerate_candidates(request: DiscoveryRequest, walker: DirectoryWalker) -> Iterator[Path]:
    """
    Yield candidate source files in walker order.

    Non-recursive requests only see the scan directory's own files.
    The order is never re-sorted here; registration order follows the walker.
    """
    max_depth = None if request.recursive else 0

    for candidate in walker.walk(request.scan_directory, SOURCE_GLOB, max_depth):
        yield Path(candidate)
