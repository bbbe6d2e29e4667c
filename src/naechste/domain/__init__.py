"""Domain layer: immutable values, exceptions and ports. No I/O."""
