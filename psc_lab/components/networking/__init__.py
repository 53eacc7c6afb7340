"""
Networking components for the publisher VPC.

Components:
- NetworkComponent: custom-mode VPC with app, proxy-only and PSC subnets
"""

from psc_lab.components.networking.vpc import NetworkComponent, NetworkOutputs

__all__ = [
    "NetworkComponent",
    "NetworkOutputs",
]
