"""
Pulumi infrastructure-as-code for the Private Service Connect lab.

This package defines Google Cloud infrastructure including:
- Publisher VPC with application, proxy-only and PSC NAT subnets
- Internal-only Cloud Run service
- Internal regional application load balancer in front of Cloud Run
- Service attachment exposing the load balancer over Private Service Connect
- Consumer endpoint in a second project reaching the attachment
"""
