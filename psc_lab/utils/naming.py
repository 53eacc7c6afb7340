"""
Resource naming conventions for Pulumi logical resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent logical names for stack resources.

    Physical Google Cloud names come from configs.constants.RESOURCE_NAMES;
    these names only identify resources inside the Pulumi state.

    Attributes:
        project: Project identifier
        environment: Deployment environment (lab, dev, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a logical resource name.

        Args:
            resource: Resource identifier (e.g., 'network', 'publisher')

        Returns:
            Formatted resource name
        """
        return f"{self.project}-{self.environment}-{resource}"
