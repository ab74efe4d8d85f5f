"""
sitesmith Utils Module

- logger: Logging setup and configuration
- merge: Deep merge for dictionaries
- util: Memory, slug and bundle helpers

Usage:
    from sitesmith.utils import setup_logger, deep_merge, convert_memory
"""

from .logger import setup_logger, StepFilter
from .merge import deep_merge, set_nested
from .util import convert_memory, memory_usage, slugify, is_frozen, bundle_dir

__all__ = [
    'setup_logger',
    'StepFilter',
    'deep_merge',
    'set_nested',
    'convert_memory',
    'memory_usage',
    'slugify',
    'is_frozen',
    'bundle_dir',
]
