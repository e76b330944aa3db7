"""REST plumbing: session, request descriptions, execution and the public clients."""
