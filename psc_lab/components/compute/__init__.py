"""
Compute components.

Components:
- CloudRunServiceComponent: internal-only Cloud Run service with invoker binding
"""

from psc_lab.components.compute.cloud_run import CloudRunOutputs, CloudRunServiceComponent

__all__ = [
    "CloudRunServiceComponent",
    "CloudRunOutputs",
]
