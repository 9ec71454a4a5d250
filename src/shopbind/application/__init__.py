"""Application layer: resource bindings."""
