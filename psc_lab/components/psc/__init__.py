"""
Private Service Connect components.

Components:
- ServiceAttachmentComponent: publishes a forwarding rule to other projects
- ConsumerEndpointComponent: endpoint in the consumer project reaching it
"""

from psc_lab.components.psc.service_attachment import (
    ServiceAttachmentComponent,
    ServiceAttachmentOutputs,
)
from psc_lab.components.psc.consumer_endpoint import (
    ConsumerEndpointComponent,
    ConsumerEndpointOutputs,
)

__all__ = [
    "ServiceAttachmentComponent",
    "ServiceAttachmentOutputs",
    "ConsumerEndpointComponent",
    "ConsumerEndpointOutputs",
]
