"""Domain layer: abstractions, variants and consumers for each principle."""
