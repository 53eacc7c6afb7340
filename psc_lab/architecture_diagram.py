"""
PSC Lab Architecture Diagram.

Draws the publisher and consumer projects and the Private Service Connect path.

Dependencies:
    pip install diagrams  (plus the graphviz binaries)

Usage:
    python -m psc_lab.architecture_diagram
    # Outputs: psc_lab_architecture.png
"""

from diagrams import Cluster, Diagram, Edge
from diagrams.gcp.compute import Run
from diagrams.gcp.network import LoadBalancing, VPC
from diagrams.gcp.security import Iam
from diagrams.onprem.client import Users

from psc_lab.configs.constants import (
    CONSUMER_ADDRESS,
    LOAD_BALANCER_ADDRESS,
    PORTS,
    REGION,
    RESOURCE_NAMES,
    SUBNET_CIDRS,
)

graph_attr = {
    "fontsize": "14",
    "bgcolor": "white",
    "pad": "0.5",
    "splines": "ortho",
    "nodesep": "0.8",
    "ranksep": "1.2",
}

node_attr = {
    "fontsize": "11",
}

edge_attr = {
    "fontsize": "9",
}


def render(filename: str = "psc_lab_architecture", show: bool = False) -> None:
    """
    Render the architecture diagram to `{filename}.png`.

    Args:
        filename: Output path without extension
        show: Open the image after rendering
    """
    with Diagram(
        f"PSC Lab Architecture\n({REGION})",
        filename=filename,
        show=show,
        direction="LR",
        graph_attr=graph_attr,
        node_attr=node_attr,
        edge_attr=edge_attr,
    ):
        with Cluster("Consumer project"):
            clients = Users("Clients\n(default VPC)")
            endpoint = VPC(f"{RESOURCE_NAMES['consumer_forwarding_rule']}\n{CONSUMER_ADDRESS}")

        with Cluster("Publisher project"):
            with Cluster(RESOURCE_NAMES["network"]):
                with Cluster(f"{RESOURCE_NAMES['psc_subnet']} {SUBNET_CIDRS['psc']}"):
                    attachment = VPC(RESOURCE_NAMES["service_attachment"])

                with Cluster(f"{RESOURCE_NAMES['app_subnet']} {SUBNET_CIDRS['app']}"):
                    load_balancer = LoadBalancing(
                        f"{RESOURCE_NAMES['forwarding_rule']}\n"
                        f"{LOAD_BALANCER_ADDRESS}:{PORTS['http']}"
                    )

                with Cluster(f"{RESOURCE_NAMES['proxy_subnet']} {SUBNET_CIDRS['proxy']}"):
                    proxies = LoadBalancing("Envoy proxies")

            service = Run(RESOURCE_NAMES["service"])
            invoker = Iam("run.invoker")

        clients >> endpoint
        endpoint >> Edge(label="PSC", color="darkgreen", style="bold") >> attachment
        attachment >> Edge(label="NAT") >> load_balancer
        load_balancer >> proxies
        proxies >> Edge(label="serverless NEG") >> service
        invoker - Edge(style="dashed") - service


if __name__ == "__main__":
    render()
