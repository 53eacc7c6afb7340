"""
PSC Service Attachment Component (publisher side).

Concept: "Let another project reach a private service without VPC peering."

- target_service: the internal load balancer's forwarding rule.
- nat_subnets: consumer traffic is source-NATed into the PSC subnet, so the
  publisher never sees consumer IP ranges and the two networks may overlap.
- ACCEPT_MANUAL: only networks listed in the accept list can connect, each up
  to its connection limit.

CRITICAL DISTINCTION: PSC vs VPC Peering:
┌──────────────────────────────────────────────────────────────────────────┐
│ VPC Peering:                                                             │
│   - Joins two whole networks. Ranges must not overlap.                   │
│   - Both sides see each other's routes.                                  │
│                                                                          │
│ Private Service Connect:                                                 │
│   - Exposes ONE service. The consumer gets a single IP in its own VPC.   │
│   - No route exchange. Ranges may overlap (traffic is NATed).            │
└──────────────────────────────────────────────────────────────────────────┘
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from psc_lab.configs.constants import PSC_DEFAULTS, RESOURCE_NAMES


@dataclass
class ServiceAttachmentOutputs:
    """Output values from service attachment component."""
    service_attachment_id: pulumi.Output[str]
    service_attachment_self_link: pulumi.Output[str]


class ServiceAttachmentComponent(pulumi.ComponentResource):
    """
    Service attachment publishing a forwarding rule to an allow-listed network.
    """

    def __init__(
        self,
        name: str,
        region: str,
        target_service: pulumi.Input[str],
        nat_subnets: list[pulumi.Input[str]],
        consumer_network_url: str,
        connection_limit: int,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:psc:ServiceAttachment", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.service_attachment = gcp.compute.ServiceAttachment(
            f"{name}-service-attachment",
            name=RESOURCE_NAMES["service_attachment"],
            region=region,
            target_service=target_service,
            connection_preference=PSC_DEFAULTS["connection_preference"],
            nat_subnets=nat_subnets,
            enable_proxy_protocol=PSC_DEFAULTS["enable_proxy_protocol"],
            consumer_accept_lists=[
                gcp.compute.ServiceAttachmentConsumerAcceptListArgs(
                    network_url=consumer_network_url,
                    connection_limit=connection_limit,
                ),
            ],
            opts=child_opts,
        )

        self.register_outputs({
            "service_attachment_id": self.service_attachment.id,
            "service_attachment_self_link": self.service_attachment.self_link,
        })

    def get_outputs(self) -> ServiceAttachmentOutputs:
        """Get service attachment output values."""
        return ServiceAttachmentOutputs(
            service_attachment_id=self.service_attachment.id,
            service_attachment_self_link=self.service_attachment.self_link,
        )
