"""
VPC Component Resource for the publisher network.

Steps & Architecture:
1. Network: custom-mode VPC (no auto-created subnets), so every range is explicit.
2. Subnetworks:
   - App (10.0.0.0/24, PRIVATE): holds the load balancer frontend address.
   - Proxy-only (10.0.1.0/24, REGIONAL_MANAGED_PROXY, ACTIVE): Envoy proxies for
     every internal regional application load balancer in this region and VPC.
     Nothing references it; it only has to exist before the forwarding rule.
   - PSC (10.0.2.0/24, PRIVATE_SERVICE_CONNECT): source NAT range for traffic
     arriving from consumer projects through the service attachment.

Traffic path:
  PSC endpoint -> PSC subnet -> app subnet -> load balancer -> Cloud Run
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from psc_lab.configs.constants import PROXY_SUBNET_ROLE, RESOURCE_NAMES, SUBNET_PURPOSES


@dataclass
class NetworkOutputs:
    """Output values from network component."""
    network_id: pulumi.Output[str]
    network_name: pulumi.Output[str]
    app_subnet_id: pulumi.Output[str]
    app_subnet_name: pulumi.Output[str]
    proxy_subnet_id: pulumi.Output[str]
    psc_subnet_id: pulumi.Output[str]


class NetworkComponent(pulumi.ComponentResource):
    """
    Publisher VPC with the three subnets the private service needs.
    """

    def __init__(
        self,
        name: str,
        region: str,
        subnet_cidrs: dict[str, str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Network", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.network = gcp.compute.Network(
            f"{name}-network",
            name=RESOURCE_NAMES["network"],
            auto_create_subnetworks=False,
            description="VPC containing the private services exposed over PSC",
            opts=child_opts,
        )

        self.app_subnet = self._create_subnet(name, "app", region, subnet_cidrs, child_opts)
        self.proxy_subnet = self._create_subnet(
            name, "proxy", region, subnet_cidrs, child_opts, role=PROXY_SUBNET_ROLE,
        )
        self.psc_subnet = self._create_subnet(name, "psc", region, subnet_cidrs, child_opts)

        self.register_outputs({
            "network_id": self.network.id,
            "network_name": self.network.name,
            "app_subnet_id": self.app_subnet.id,
            "proxy_subnet_id": self.proxy_subnet.id,
            "psc_subnet_id": self.psc_subnet.id,
        })

    def _create_subnet(
        self,
        name: str,
        subnet_role: str,
        region: str,
        subnet_cidrs: dict[str, str],
        opts: pulumi.ResourceOptions,
        role: str | None = None,
    ) -> gcp.compute.Subnetwork:
        """Create one subnetwork attached to the network by name."""
        return gcp.compute.Subnetwork(
            f"{name}-{subnet_role}-subnet",
            name=RESOURCE_NAMES[f"{subnet_role}_subnet"],
            network=self.network.name,
            region=region,
            ip_cidr_range=subnet_cidrs[subnet_role],
            purpose=SUBNET_PURPOSES[subnet_role],
            role=role,
            opts=opts,
        )

    def get_outputs(self) -> NetworkOutputs:
        """Get network output values."""
        return NetworkOutputs(
            network_id=self.network.id,
            network_name=self.network.name,
            app_subnet_id=self.app_subnet.id,
            app_subnet_name=self.app_subnet.name,
            proxy_subnet_id=self.proxy_subnet.id,
            psc_subnet_id=self.psc_subnet.id,
        )
