"""
Pulumi program entry point for the PSC lab infrastructure.

1. Load and validate configuration
2. Declare the resource graph (see psc_lab.stack)
3. Export outputs and mirror them to a local env file
"""

import pulumi

from psc_lab.configs.constants import CONSUMER_PROJECT, PUBLISHER_PROJECT
from psc_lab.configs.environment import get_config
from psc_lab.stack import build_stack
from psc_lab.utils.naming import ResourceNamer
from psc_lab.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the PSC lab infrastructure."""
    config = get_config()
    config.validate()

    namer = ResourceNamer(project="psc-lab", environment=config.environment)

    placeholders = {PUBLISHER_PROJECT, CONSUMER_PROJECT}
    if {config.publisher_project, config.consumer_project} & placeholders:
        pulumi.log.warn(
            "Using placeholder project ids; set publisher_project and consumer_project"
        )

    outputs = build_stack(config, namer)

    # Write outputs to .env file for local tooling
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
