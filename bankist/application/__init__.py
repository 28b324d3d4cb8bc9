"""Application layer: ports and session use cases."""
