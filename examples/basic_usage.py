#!/usr/bin/env python3
"""
Basic automerge usage example.

Runs merge decisions against an in-memory remote, so no token or network
access is needed.
Run with: python examples/basic_usage.py
"""

import logging

from automerge import EngineSettings, configure_logging, decide, handle_issue_comment
from automerge.testing import (
    MockRemoteCall,
    create_event,
    create_pull_request_body,
    create_remote_response,
    create_webhook_payload,
)

configure_logging(level=logging.INFO)

print("=== automerge Basic Usage Example ===\n")

# 1. A mergeable pull request, commented on by its author
print("1. Merging a mergeable pull request...")
remote = MockRemoteCall()
remote.configure("GET", create_remote_response(200, create_pull_request_body()))
remote.configure("PUT", create_remote_response(200, {"merged": True}))

comment = decide(create_event(), remote, EngineSettings())
print(f"   Comment: {comment!r} (empty means merged)")
print(f"   Calls: {[c.method for c in remote.calls]}\n")

# 2. Someone else asks for the merge
print("2. Non-author comment with author restriction on...")
remote.reset()
remote.configure("GET", create_remote_response(200, create_pull_request_body()))

comment = decide(create_event(comment_author_login="drive-by"), remote, EngineSettings())
print(f"   Comment: {comment}\n")

# 3. The API refuses the merge
print("3. Merge rejected by the API...")
remote.reset()
remote.configure("GET", create_remote_response(200, create_pull_request_body()))
remote.configure("PUT", create_remote_response(405, {"message": 'Required status check "ci" is expected.'}))

comment = decide(create_event(), remote, EngineSettings())
print(f"   Comment: {comment}\n")

# 4. Full webhook handling, including the comment post
print("4. Handling a webhook payload...")
remote.reset()
remote.configure("GET", create_remote_response(200, create_pull_request_body(mergeable=False)))

result = handle_issue_comment(create_webhook_payload(), remote, EngineSettings())
print(f"   Action: {result.action.value}")
print(f"   Posted: {[c.payload for c in remote.get_calls('POST')]}")

print("\n=== Done ===")
