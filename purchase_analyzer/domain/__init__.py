"""Domain layer: data models and the derivation engine."""
