"""Service layer: configuration handling and name resolution."""
