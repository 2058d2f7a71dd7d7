"""Discovery application layer."""

from class_discovery.application.discoverer import Discoverer
from class_discovery.application.filters import FilterPipeline
from class_discovery.application.results import DiscoveredTypes
from class_discovery.application.translator import translate

__all__ = [
    "Discoverer",
    "DiscoveredTypes",
    "FilterPipeline",
    "translate",
]
