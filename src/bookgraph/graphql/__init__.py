"""GraphQL API for bookgraph."""
