"""Infrastructure layer: stateless text scanning and path matching."""
