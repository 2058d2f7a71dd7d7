"""
class-discovery: find classes under a source tree by path convention.

    from class_discovery import get_discoverer

    listeners = get_discoverer().in_("Listeners").with_method("handle").classes()
"""

from class_discovery.application.discoverer import Discoverer
from class_discovery.application.results import DiscoveredTypes
from class_discovery.domain.attributes import TypeAttribute, attributes
from class_discovery.domain.exceptions import (
    ConfigurationError,
    DiscoveryError,
    PathTranslationError,
)
from class_discovery.domain.models import DiscoveryRequest, TypeDescriptor
from class_discovery.provider import get_discoverer, make_discoverer

__version__ = "0.1.0"

__all__ = [
    "Discoverer",
    "DiscoveredTypes",
    "DiscoveryRequest",
    "TypeDescriptor",
    "TypeAttribute",
    "attributes",
    "DiscoveryError",
    "PathTranslationError",
    "ConfigurationError",
    "get_discoverer",
    "make_discoverer",
]
