"""Application layer - ports, permission policy, directory services."""
