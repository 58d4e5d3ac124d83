"""Card, hand, trick and rules models."""
