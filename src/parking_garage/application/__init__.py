"""Application layer: parking service, commands and DTOs."""
