"""Pytest fixtures and Pulumi mocks for infrastructure tests."""

from pathlib import Path

import pulumi
import pytest

from psc_lab.configs.base import StackConfig


class PscMocks(pulumi.runtime.Mocks):
    """Echo inputs back as state, fill in provider-computed fields and
    remember the inputs each resource was registered with."""

    COMPUTED: dict[str, dict[str, str]] = {
        "gcp:cloudrunv2/service:Service": {
            "uri": "https://service-abc123-nw.a.run.app",
        },
        "gcp:compute/serviceAttachment:ServiceAttachment": {
            "selfLink": "https://www.googleapis.com/compute/v1/projects/project-a"
                        "/regions/europe-west2/serviceAttachments/psc-service-attachment",
        },
    }

    def __init__(self):
        self.inputs_by_name: dict[str, dict] = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.inputs_by_name[args.name] = dict(args.inputs)
        state = {**args.inputs, **self.COMPUTED.get(args.typ, {})}
        return [f"{args.name}_id", state]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


MOCKS = PscMocks()

# Must be registered before any resource is constructed
pulumi.runtime.set_mocks(MOCKS, project="psc-lab", stack="lab", preview=False)


def make_stack_config(**overrides) -> StackConfig:
    """Build a StackConfig with lab defaults."""
    values = dict(
        environment="lab",
        region="europe-west2",
        publisher_project="publisher-123",
        consumer_project="consumer-456",
        consumer_network="default",
        consumer_subnetwork="default",
        consumer_address="10.154.0.5",
        load_balancer_address="10.0.0.10",
        container_image="us-docker.pkg.dev/cloudrun/container/hello",
        invoker_member="allUsers",
        connection_limit=10,
    )
    values.update(overrides)
    return StackConfig(**values)


@pytest.fixture
def stack_config() -> StackConfig:
    """Return a valid lab StackConfig."""
    return make_stack_config()


@pytest.fixture
def iac_project_root():
    """Return the infrastructure package root directory."""
    return Path(__file__).parent.parent.parent / "psc_lab"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the infrastructure package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def registered_inputs() -> dict[str, dict]:
    """Inputs of every mocked resource, keyed by logical name."""
    return MOCKS.inputs_by_name
