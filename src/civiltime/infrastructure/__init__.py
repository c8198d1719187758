"""Infrastructure layer: adapters from civil values to storage systems."""
