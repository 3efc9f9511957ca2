"""Application layer: use cases built on the banking domain."""
