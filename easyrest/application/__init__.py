"""Application layer - route resolution and the resource use cases."""
