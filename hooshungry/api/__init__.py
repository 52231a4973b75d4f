"""
GraphQL transport layer.

Responsibilities:
- Resolve the endpoint and timeout from the environment (and .env).
- POST a GraphQL document plus variables as JSON.
- Classify failures: transport, HTTP status, malformed body, GraphQL errors.
"""
