"""Application layer: DTOs, repository/service ports, and use-case services."""
