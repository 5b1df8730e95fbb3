"""Feature slices of the block graph: blocks, links, documents, connectors."""
