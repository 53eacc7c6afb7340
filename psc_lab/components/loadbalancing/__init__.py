"""
Load balancing components.

Components:
- InternalLoadBalancerComponent: internal regional application load balancer
  fronting a Cloud Run service
"""

from psc_lab.components.loadbalancing.internal_alb import (
    InternalLoadBalancerComponent,
    LoadBalancerOutputs,
)

__all__ = [
    "InternalLoadBalancerComponent",
    "LoadBalancerOutputs",
]
