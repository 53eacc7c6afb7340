"""
Label factory for Google Cloud resources.

Label keys and values are limited to lowercase letters, digits,
underscores and dashes, 63 characters each.
"""

import re

from psc_lab.configs.constants import DEFAULT_LABELS

_INVALID_LABEL_CHARS = re.compile(r"[^a-z0-9_-]")
_MAX_LABEL_LENGTH = 63


def sanitize_label(value: object) -> str:
    """Lowercase a label key or value and replace characters GCP rejects."""
    return _INVALID_LABEL_CHARS.sub("-", str(value).lower())[:_MAX_LABEL_LENGTH]


def create_labels(
    environment: str,
    component: str,
    **extra_labels: str,
) -> dict[str, str]:
    """
    Create a standard label set for a Google Cloud resource.

    Args:
        environment: Deployment environment
        component: Logical component the resource belongs to
        **extra_labels: Additional labels to include

    Returns:
        Dictionary of sanitized labels
    """
    labels = {
        **DEFAULT_LABELS,
        "environment": environment,
        "component": component,
    }
    labels.update(extra_labels)
    return merge_labels(labels)


def merge_labels(*label_sets: dict[str, object]) -> dict[str, str]:
    """
    Merge label dictionaries into one GCP-safe label set.

    Later sets win on key collisions, compared after sanitising, so
    `Team` from stack config overrides a default `team`.

    Args:
        *label_sets: Label dictionaries, lowest precedence first

    Returns:
        Merged label dictionary with sanitized keys and string values
    """
    return {
        sanitize_label(key): sanitize_label(value)
        for labels in label_sets
        for key, value in labels.items()
    }
