"""Design pattern walk-throughs, one module per pattern."""
