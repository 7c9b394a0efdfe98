"""taskhub development database tooling."""
