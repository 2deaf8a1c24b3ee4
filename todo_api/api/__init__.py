"""HTTP surface and response serialization."""
