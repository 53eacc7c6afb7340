"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from psc_lab.configs.base import InvalidConfigError, StackConfig
from psc_lab.configs.environment import get_config
from psc_lab.configs.constants import (
    REGION,
    SUBNET_CIDRS,
    DEFAULT_LABELS,
    RESOURCE_NAMES,
)

__all__ = [
    "InvalidConfigError",
    "StackConfig",
    "get_config",
    "REGION",
    "SUBNET_CIDRS",
    "DEFAULT_LABELS",
    "RESOURCE_NAMES",
]
