"""
Base configuration dataclass for stack settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

import ipaddress
from dataclasses import dataclass, field

import pulumi

from psc_lab.configs.constants import COMPUTE_API_URL, SUBNET_CIDRS


class InvalidConfigError(pulumi.RunError):
    """Raised when stack configuration is present but inconsistent."""


@dataclass(frozen=True)
class StackConfig:
    """
    Stack-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (lab, dev, prod)
        region: Region for all regional resources
        publisher_project: Project hosting the private service (producer side)
        consumer_project: Project reaching the service over PSC
        consumer_network: Network name in the consumer project
        consumer_subnetwork: Subnetwork name in the consumer project
        consumer_address: Internal IP reserved for the PSC endpoint
        load_balancer_address: Internal IP reserved for the load balancer
        container_image: Image served by the Cloud Run service
        invoker_member: IAM member granted run.invoker on the service
        connection_limit: Max PSC connections accepted from the consumer network
        publisher_only: Skip the consumer endpoint
        subnet_cidrs: CIDR ranges keyed by subnet role (app, proxy, psc)
        labels: Extra labels merged onto every labelled resource
    """
    environment: str
    region: str
    publisher_project: str
    consumer_project: str
    consumer_network: str
    consumer_subnetwork: str
    consumer_address: str
    load_balancer_address: str
    container_image: str
    invoker_member: str
    connection_limit: int
    publisher_only: bool = False
    subnet_cidrs: dict[str, str] = field(default_factory=lambda: dict(SUBNET_CIDRS))
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def consumer_network_url(self) -> str:
        """Full URL of the consumer network allowed to connect."""
        return (
            f"{COMPUTE_API_URL}/projects/{self.consumer_project}"
            f"/global/networks/{self.consumer_network}"
        )

    def validate(self) -> None:
        """
        Check the configuration for values the provider would reject late.

        Raises:
            InvalidConfigError: If any value is malformed or inconsistent
        """
        missing = set(SUBNET_CIDRS) - set(self.subnet_cidrs)
        if missing:
            raise InvalidConfigError(f"Missing subnet CIDRs: {', '.join(sorted(missing))}")

        networks = {}
        for role, cidr in self.subnet_cidrs.items():
            try:
                networks[role] = ipaddress.ip_network(cidr)
            except ValueError as e:
                raise InvalidConfigError(f"Invalid CIDR for {role} subnet: {cidr} ({e})") from e

        roles = sorted(networks)
        for i, first in enumerate(roles):
            for second in roles[i + 1:]:
                if networks[first].overlaps(networks[second]):
                    raise InvalidConfigError(
                        f"Subnet CIDRs overlap: {first} {networks[first]} "
                        f"and {second} {networks[second]}"
                    )

        lb_address = self._parse_address("load_balancer_address", self.load_balancer_address)
        app_network = networks["app"]
        if lb_address not in app_network:
            raise InvalidConfigError(
                f"Load balancer address {lb_address} is outside app subnet {app_network}"
            )
        # GCP reserves the network, gateway, second-to-last and broadcast addresses
        reserved = {
            app_network.network_address,
            app_network.network_address + 1,
            app_network.broadcast_address - 1,
            app_network.broadcast_address,
        }
        if lb_address in reserved:
            raise InvalidConfigError(
                f"Load balancer address {lb_address} is reserved in {app_network}"
            )

        self._parse_address("consumer_address", self.consumer_address)

        if self.connection_limit < 1:
            raise InvalidConfigError(
                f"connection_limit must be positive, got {self.connection_limit}"
            )

        if self.publisher_project == self.consumer_project:
            raise InvalidConfigError(
                "publisher_project and consumer_project must differ for a cross-project connection"
            )

    @staticmethod
    def _parse_address(key: str, value: str) -> ipaddress.IPv4Address:
        try:
            address = ipaddress.ip_address(value)
        except ValueError as e:
            raise InvalidConfigError(f"Invalid {key}: {value}") from e
        if address.version != 4:
            raise InvalidConfigError(f"{key} must be IPv4, got {value}")
        return address
