"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, label factories, and output utilities.
"""

from psc_lab.utils.naming import ResourceNamer
from psc_lab.utils.labels import create_labels, merge_labels
from psc_lab.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_labels",
    "merge_labels",
    "write_outputs_to_env",
]
