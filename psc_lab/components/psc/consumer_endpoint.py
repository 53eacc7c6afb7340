"""
PSC Consumer Endpoint Component (consumer side).

Lives in the consumer project. A reserved internal IP plus a forwarding rule
whose target is the publisher's service attachment. Clients in the consumer
network call that IP and land on the publisher's load balancer.

The load balancing scheme must be the empty string: PSC endpoints are not
load balancers, and the provider rejects any scheme value here.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from psc_lab.configs.constants import RESOURCE_NAMES


@dataclass
class ConsumerEndpointOutputs:
    """Output values from consumer endpoint component."""
    address: pulumi.Output[str]
    forwarding_rule_id: pulumi.Output[str]


class ConsumerEndpointComponent(pulumi.ComponentResource):
    """
    PSC endpoint in the consumer project.
    """

    def __init__(
        self,
        name: str,
        project: str,
        region: str,
        network: str,
        subnetwork: str,
        ip_address: str,
        service_attachment: pulumi.Input[str],
        labels: dict[str, str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:psc:ConsumerEndpoint", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.address = gcp.compute.Address(
            f"{name}-address",
            name=RESOURCE_NAMES["consumer_address"],
            project=project,
            region=region,
            subnetwork=subnetwork,
            address_type="INTERNAL",
            address=ip_address,
            ip_version="IPV4",
            labels=labels,
            opts=child_opts,
        )

        self.forwarding_rule = gcp.compute.ForwardingRule(
            f"{name}-forwarding-rule",
            name=RESOURCE_NAMES["consumer_forwarding_rule"],
            project=project,
            region=region,
            network=network,
            subnetwork=subnetwork,
            target=service_attachment,
            load_balancing_scheme="",
            ip_address=self.address.id,
            labels=labels,
            opts=child_opts,
        )

        self.register_outputs({
            "address": self.address.address,
            "forwarding_rule_id": self.forwarding_rule.id,
        })

    def get_outputs(self) -> ConsumerEndpointOutputs:
        """Get consumer endpoint output values."""
        return ConsumerEndpointOutputs(
            address=self.address.address,
            forwarding_rule_id=self.forwarding_rule.id,
        )
