"""
Pulumi component resources for the PSC lab infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC network and its subnetworks
- compute: Cloud Run service and invoker binding
- loadbalancing: internal regional application load balancer
- psc: service attachment (publisher) and endpoint (consumer)
"""
