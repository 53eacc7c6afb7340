"""
Resource graph for the PSC lab stack.

Instantiates all component resources in dependency order:
1. Provider (publisher project and region)
2. Network -> Cloud Run service
3. Internal load balancer (needs the app subnet and the service)
4. Service attachment (needs the forwarding rule and the PSC subnet)
5. Consumer endpoint (needs the service attachment)

Ordering here is only for readability: the engine derives the real order from
the outputs passed between components.
"""

import pulumi
import pulumi_gcp as gcp

from psc_lab.configs.base import StackConfig
from psc_lab.utils.labels import create_labels, merge_labels
from psc_lab.utils.naming import ResourceNamer

from psc_lab.components.networking.vpc import NetworkComponent
from psc_lab.components.compute.cloud_run import CloudRunServiceComponent
from psc_lab.components.loadbalancing.internal_alb import InternalLoadBalancerComponent
from psc_lab.components.psc.service_attachment import ServiceAttachmentComponent
from psc_lab.components.psc.consumer_endpoint import ConsumerEndpointComponent


def build_stack(config: StackConfig, namer: ResourceNamer) -> dict[str, pulumi.Output]:
    """
    Declare every resource of the stack.

    Args:
        config: Validated stack configuration
        namer: ResourceNamer for logical resource names

    Returns:
        Mapping of stack output names to values
    """
    provider = gcp.Provider(
        namer.name("google"),
        project=config.publisher_project,
        region=config.region,
    )
    component_opts = pulumi.ResourceOptions(providers=[provider])

    # --- Publisher side ---
    network = NetworkComponent(
        name=namer.name("network"),
        region=config.region,
        subnet_cidrs=config.subnet_cidrs,
        opts=component_opts,
    )
    network_outputs = network.get_outputs()

    cloud_run = CloudRunServiceComponent(
        name=namer.name("service"),
        region=config.region,
        image=config.container_image,
        invoker_member=config.invoker_member,
        labels=merge_labels(create_labels(config.environment, "service"), config.labels),
        opts=component_opts,
    )
    cloud_run_outputs = cloud_run.get_outputs()

    load_balancer = InternalLoadBalancerComponent(
        name=namer.name("lb"),
        region=config.region,
        network=network_outputs.network_name,
        subnetwork=network_outputs.app_subnet_name,
        cloud_run_service=cloud_run_outputs.service_name,
        ip_address=config.load_balancer_address,
        labels=merge_labels(create_labels(config.environment, "load-balancer"), config.labels),
        proxy_subnet=network.proxy_subnet,
        opts=component_opts,
    )
    lb_outputs = load_balancer.get_outputs()

    # --- Private service connection ---
    attachment = ServiceAttachmentComponent(
        name=namer.name("psc"),
        region=config.region,
        target_service=lb_outputs.forwarding_rule_id,
        nat_subnets=[network_outputs.psc_subnet_id],
        consumer_network_url=config.consumer_network_url,
        connection_limit=config.connection_limit,
        opts=component_opts,
    )
    attachment_outputs = attachment.get_outputs()

    outputs = {
        "network_id": network_outputs.network_id,
        "app_subnet_id": network_outputs.app_subnet_id,
        "proxy_subnet_id": network_outputs.proxy_subnet_id,
        "psc_subnet_id": network_outputs.psc_subnet_id,
        "cloud_run_uri": cloud_run_outputs.service_uri,
        "load_balancer_address": lb_outputs.address,
        "forwarding_rule_id": lb_outputs.forwarding_rule_id,
        "service_attachment_id": attachment_outputs.service_attachment_id,
        "service_attachment_self_link": attachment_outputs.service_attachment_self_link,
    }

    if config.publisher_only:
        pulumi.log.info(
            f"publisher_only set: skipping consumer endpoint in {config.consumer_project}"
        )
        return outputs

    # --- Consumer side ---
    consumer = ConsumerEndpointComponent(
        name=namer.name("consumer"),
        project=config.consumer_project,
        region=config.region,
        network=config.consumer_network,
        subnetwork=config.consumer_subnetwork,
        ip_address=config.consumer_address,
        service_attachment=attachment_outputs.service_attachment_id,
        labels=merge_labels(create_labels(config.environment, "psc-endpoint"), config.labels),
        opts=component_opts,
    )
    consumer_outputs = consumer.get_outputs()

    outputs.update({
        "consumer_endpoint_address": consumer_outputs.address,
        "consumer_forwarding_rule_id": consumer_outputs.forwarding_rule_id,
    })
    return outputs
