#!/usr/bin/env python3
"""
Basic hubwire usage example.

Run with: python examples/basic_usage.py
"""

import json

from hubwire import DecodeError, FlexibleTimestamp, HubwireError
from hubwire.testing import create_deployment_payload
from hubwire.types import Deployment, DeploymentRequest, DeploymentStatusRequest, State

print("=== hubwire Basic Usage Example ===\n")

# 1. Timestamps arrive in two shapes
print("1. Decoding timestamps...")
from_string = FlexibleTimestamp.decode("2015-01-01T00:00:00Z")
from_epoch = FlexibleTimestamp.decode(1420070400)
print(f"   String: {from_string}")
print(f"   Epoch:  {from_epoch}")
assert from_string == from_epoch, "Both forms should name the same instant"
print("   OK: same instant\n")

# 2. Bad values fail loudly
print("2. Rejecting malformed values...")
for bad in ["yesterday", 2**64, 1.5]:
    try:
        FlexibleTimestamp.decode(bad)
    except DecodeError as e:
        print(f"   {bad!r}: {e}")
print()

# 3. Decoding a record reports the failing field
print("3. Decoding a deployment...")
deployment = Deployment.from_dict(create_deployment_payload(created_at=1420070400))
print(f"   {deployment.commit_ref} created {deployment.created_at}")
try:
    Deployment.from_dict(create_deployment_payload(updated_at="not a date"))
except HubwireError as e:
    print(f"   Malformed payload: {e}")
print()

# 4. Sparse request bodies
print("4. Building request bodies...")
body = DeploymentRequest.builder("test").build().to_json()
print(f"   Mandatory only: {body}")
assert body == '{"ref":"test"}'

body = DeploymentRequest.builder("test").task("launchit").build().to_json()
print(f"   With task:      {body}")
assert body == '{"ref":"test","task":"launchit"}'

status = (
    DeploymentStatusRequest.builder(State.PENDING)
    .description("desc")
    .target_url("http://host.com")
    .build()
)
print(f"   Status:         {json.dumps(status.to_dict())}")
print("\n=== Done ===")
