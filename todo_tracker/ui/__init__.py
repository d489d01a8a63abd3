"""UI modules."""
