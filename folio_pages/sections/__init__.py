"""Section type descriptors and the registry that catalogues them."""

from .catalog import CONTENT_SECTIONS, DATA_SECTIONS, build_default_registry
from .registry import SectionDescriptor, SectionRegistry

__all__ = [
    "CONTENT_SECTIONS",
    "DATA_SECTIONS",
    "SectionDescriptor",
    "SectionRegistry",
    "build_default_registry",
]
