"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from psc_lab.configs.base import InvalidConfigError, StackConfig
from psc_lab.configs.constants import (
    CLOUD_RUN_DEFAULTS,
    CONSUMER_ADDRESS,
    CONSUMER_NETWORK,
    CONSUMER_PROJECT,
    CONSUMER_SUBNETWORK,
    LOAD_BALANCER_ADDRESS,
    PSC_DEFAULTS,
    PUBLISHER_PROJECT,
    REGION,
    SUBNET_CIDRS,
)


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    try:
        value = config.get_int(key)
    except pulumi.ConfigTypeError as e:
        raise InvalidConfigError(f"{key} must be an integer: {e}") from e
    return default if value is None else value


def _get_mapping(config: pulumi.Config, key: str) -> dict:
    value = config.get_object(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidConfigError(
            f"{key} must be a mapping, got {type(value).__name__}"
        )
    return value


def get_config(config: pulumi.Config | None = None) -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    Args:
        config: Config namespace to read from (defaults to the project namespace)

    Returns:
        StackConfig: Configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        InvalidConfigError: If a value has the wrong type
    """
    config = config or pulumi.Config()

    subnet_cidrs = dict(SUBNET_CIDRS)
    subnet_cidrs.update(_get_mapping(config, "subnet_cidrs"))

    return StackConfig(
        environment=config.require("environment"),
        region=config.get("region") or REGION,
        publisher_project=config.get("publisher_project") or PUBLISHER_PROJECT,
        consumer_project=config.get("consumer_project") or CONSUMER_PROJECT,
        consumer_network=config.get("consumer_network") or CONSUMER_NETWORK,
        consumer_subnetwork=config.get("consumer_subnetwork") or CONSUMER_SUBNETWORK,
        consumer_address=config.get("consumer_address") or CONSUMER_ADDRESS,
        load_balancer_address=config.get("load_balancer_address") or LOAD_BALANCER_ADDRESS,
        container_image=config.get("container_image") or CLOUD_RUN_DEFAULTS["image"],
        invoker_member=config.get("invoker_member") or CLOUD_RUN_DEFAULTS["invoker_member"],
        connection_limit=_get_int(config, "connection_limit", PSC_DEFAULTS["connection_limit"]),
        publisher_only=config.get_bool("publisher_only") or False,
        subnet_cidrs=subnet_cidrs,
        labels=_get_mapping(config, "labels"),
    )
