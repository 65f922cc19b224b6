"""HTTP application for bookgraph."""
