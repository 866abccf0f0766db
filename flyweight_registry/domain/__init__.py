"""Domain layer - vehicle value objects, rides and exceptions."""
