"""
Internal Regional Application Load Balancer Component.

A service attachment can only point at a forwarding rule, never at Cloud Run
directly, so the service is fronted by an internal load balancer first.

The 6-Resource Chain:
1. Address: reserved internal IP in the app subnet. The frontend stays stable
   across forwarding rule replacements.
2. Serverless NEG: the "pool". Points at the Cloud Run service by name.
3. Backend Service: wraps the NEG. Scheme INTERNAL_MANAGED means Envoy proxies
   running in the proxy-only subnet.
4. URL Map: the routing table. Everything goes to the default backend.
5. Target HTTP Proxy: terminates HTTP and consults the URL map.
6. Forwarding Rule: the "door". Binds address:port to the proxy.
   - Without it the load balancer has no frontend and receives nothing.
   - Its id is what the PSC service attachment publishes.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from psc_lab.configs.constants import LOAD_BALANCER_DEFAULTS, PORTS, RESOURCE_NAMES


@dataclass
class LoadBalancerOutputs:
    """Output values from internal load balancer component."""
    address: pulumi.Output[str]
    address_id: pulumi.Output[str]
    backend_service_id: pulumi.Output[str]
    url_map_id: pulumi.Output[str]
    forwarding_rule_id: pulumi.Output[str]


class InternalLoadBalancerComponent(pulumi.ComponentResource):
    """
    Internal HTTP load balancer in front of a serverless NEG.

    Only reachable from inside the network (and through PSC once published).
    """

    def __init__(
        self,
        name: str,
        region: str,
        network: pulumi.Input[str],
        subnetwork: pulumi.Input[str],
        cloud_run_service: pulumi.Input[str],
        ip_address: str,
        labels: dict[str, str],
        proxy_subnet: pulumi.Resource | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:loadbalancing:InternalLoadBalancer", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        scheme = LOAD_BALANCER_DEFAULTS["scheme"]

        self.address = gcp.compute.Address(
            f"{name}-address",
            name=RESOURCE_NAMES["lb_address"],
            region=region,
            subnetwork=subnetwork,
            address_type="INTERNAL",
            address=ip_address,
            ip_version="IPV4",
            labels=labels,
            opts=child_opts,
        )

        self.network_endpoint_group = gcp.compute.RegionNetworkEndpointGroup(
            f"{name}-neg",
            name=RESOURCE_NAMES["neg"],
            region=region,
            network_endpoint_type=LOAD_BALANCER_DEFAULTS["neg_type"],
            cloud_run=gcp.compute.RegionNetworkEndpointGroupCloudRunArgs(
                service=cloud_run_service,
            ),
            opts=child_opts,
        )

        self.backend_service = gcp.compute.RegionBackendService(
            f"{name}-backend-service",
            name=RESOURCE_NAMES["backend_service"],
            region=region,
            load_balancing_scheme=scheme,
            protocol=LOAD_BALANCER_DEFAULTS["backend_protocol"],
            backends=[
                gcp.compute.RegionBackendServiceBackendArgs(
                    group=self.network_endpoint_group.id,
                ),
            ],
            opts=child_opts,
        )

        self.url_map = gcp.compute.RegionUrlMap(
            f"{name}-url-map",
            name=RESOURCE_NAMES["url_map"],
            region=region,
            default_service=self.backend_service.id,
            opts=child_opts,
        )

        self.http_proxy = gcp.compute.RegionTargetHttpProxy(
            f"{name}-http-proxy",
            name=RESOURCE_NAMES["http_proxy"],
            region=region,
            url_map=self.url_map.id,
            opts=child_opts,
        )

        self.forwarding_rule = gcp.compute.ForwardingRule(
            f"{name}-forwarding-rule",
            name=RESOURCE_NAMES["forwarding_rule"],
            region=region,
            ip_protocol=LOAD_BALANCER_DEFAULTS["ip_protocol"],
            load_balancing_scheme=scheme,
            port_range=str(PORTS["http"]),
            target=self.http_proxy.id,
            network=network,
            subnetwork=subnetwork,
            ip_address=self.address.id,
            network_tier=LOAD_BALANCER_DEFAULTS["network_tier"],
            labels=labels,
            # Envoy proxies come from the proxy-only subnet, which nothing references
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[proxy_subnet] if proxy_subnet else None,
            ),
        )

        self.register_outputs({
            "address": self.address.address,
            "address_id": self.address.id,
            "backend_service_id": self.backend_service.id,
            "url_map_id": self.url_map.id,
            "forwarding_rule_id": self.forwarding_rule.id,
        })

    def get_outputs(self) -> LoadBalancerOutputs:
        """Get load balancer output values."""
        return LoadBalancerOutputs(
            address=self.address.address,
            address_id=self.address.id,
            backend_service_id=self.backend_service.id,
            url_map_id=self.url_map.id,
            forwarding_rule_id=self.forwarding_rule.id,
        )
