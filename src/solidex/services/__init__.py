"""Service layer: drivers that wire variants into consumers."""
