"""
Cloud Run Component for the private demo service.

The service only accepts internal traffic (INGRESS_TRAFFIC_INTERNAL_ONLY), so
it is reachable from inside the publisher project, including through the
internal load balancer's serverless NEG, but never from the internet.

The invoker binding grants run.invoker to allUsers: authentication is not the
gate here, network ingress is.
"""

from dataclasses import dataclass

import pulumi
import pulumi_gcp as gcp

from psc_lab.configs.constants import CLOUD_RUN_DEFAULTS, RESOURCE_NAMES


@dataclass
class CloudRunOutputs:
    """Output values from Cloud Run component."""
    service_name: pulumi.Output[str]
    service_id: pulumi.Output[str]
    service_uri: pulumi.Output[str]


class CloudRunServiceComponent(pulumi.ComponentResource):
    """
    Private Cloud Run v2 service and its invoker IAM member.
    """

    def __init__(
        self,
        name: str,
        region: str,
        image: str,
        invoker_member: str,
        labels: dict[str, str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:CloudRunService", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.service = gcp.cloudrunv2.Service(
            f"{name}-service",
            name=RESOURCE_NAMES["service"],
            location=region,
            deletion_protection=False,
            ingress=CLOUD_RUN_DEFAULTS["ingress"],
            template=gcp.cloudrunv2.ServiceTemplateArgs(
                containers=[
                    gcp.cloudrunv2.ServiceTemplateContainerArgs(image=image),
                ],
            ),
            labels=labels,
            opts=child_opts,
        )

        self.invoker = gcp.cloudrunv2.ServiceIamMember(
            f"{name}-invoker",
            name=self.service.name,
            location=region,
            role=CLOUD_RUN_DEFAULTS["invoker_role"],
            member=invoker_member,
            opts=child_opts,
        )

        self.register_outputs({
            "service_name": self.service.name,
            "service_id": self.service.id,
            "service_uri": self.service.uri,
        })

    def get_outputs(self) -> CloudRunOutputs:
        """Get Cloud Run output values."""
        return CloudRunOutputs(
            service_name=self.service.name,
            service_id=self.service.id,
            service_uri=self.service.uri,
        )
