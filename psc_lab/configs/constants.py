"""
Infrastructure constants for the PSC lab.

Contains region, CIDR blocks, resource names and default configurations.
"""

from typing import Final

# Region for every regional resource in the stack
REGION: Final[str] = "europe-west2"

# Default projects (overridable through stack config)
PUBLISHER_PROJECT: Final[str] = "project-a"
CONSUMER_PROJECT: Final[str] = "PROJECT-B"

# Subnet CIDR blocks in the publisher network
SUBNET_CIDRS: Final[dict[str, str]] = {
    "app": "10.0.0.0/24",    # Load balancer frontend
    "proxy": "10.0.1.0/24",  # Envoy proxies of the internal ALB
    "psc": "10.0.2.0/24",    # NAT range for PSC consumer traffic
}

# Subnet purposes, passed to the provider unchanged
SUBNET_PURPOSES: Final[dict[str, str]] = {
    "app": "PRIVATE",
    "proxy": "REGIONAL_MANAGED_PROXY",
    "psc": "PRIVATE_SERVICE_CONNECT",
}

PROXY_SUBNET_ROLE: Final[str] = "ACTIVE"

# Reserved internal addresses
LOAD_BALANCER_ADDRESS: Final[str] = "10.0.0.10"
CONSUMER_ADDRESS: Final[str] = "10.154.0.5"

# Consumer side network (the consumer project's auto-mode default VPC)
CONSUMER_NETWORK: Final[str] = "default"
CONSUMER_SUBNETWORK: Final[str] = "default"

# Physical resource names in Google Cloud
RESOURCE_NAMES: Final[dict[str, str]] = {
    "network": "network-a",
    "app_subnet": "app-subnet",
    "proxy_subnet": "proxy-subnet",
    "psc_subnet": "psc-subnet",
    "service": "service",
    "lb_address": "loadbalancer-address",
    "neg": "network-endpoint-group",
    "backend_service": "backend-service",
    "url_map": "loadbalancer",
    "http_proxy": "http-proxy",
    "forwarding_rule": "forwarding-rule",
    "service_attachment": "psc-service-attachment",
    "consumer_address": "consumer-ip",
    "consumer_forwarding_rule": "psc-forwarding-rule",
}

# Cloud Run configuration
CLOUD_RUN_DEFAULTS: Final[dict[str, str]] = {
    "image": "us-docker.pkg.dev/cloudrun/container/hello",
    "ingress": "INGRESS_TRAFFIC_INTERNAL_ONLY",
    "invoker_role": "roles/run.invoker",
    "invoker_member": "allUsers",
}

# Load balancer configuration
LOAD_BALANCER_DEFAULTS: Final[dict[str, str]] = {
    "scheme": "INTERNAL_MANAGED",
    "backend_protocol": "HTTPS",
    "ip_protocol": "TCP",
    "network_tier": "PREMIUM",
    "neg_type": "SERVERLESS",
}

# Private Service Connect configuration
PSC_DEFAULTS: Final[dict[str, object]] = {
    "connection_preference": "ACCEPT_MANUAL",
    "connection_limit": 10,
    "enable_proxy_protocol": False,
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "http": 80,
}

COMPUTE_API_URL: Final[str] = "https://www.googleapis.com/compute/v1"

# Default labels applied to resources that support them
DEFAULT_LABELS: Final[dict[str, str]] = {
    "project": "psc-lab",
    "managed-by": "pulumi",
}
