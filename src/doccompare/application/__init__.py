"""Application layer: ports, DTOs, use cases."""
