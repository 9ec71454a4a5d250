"""Infrastructure layer: transport to the Admin API."""
