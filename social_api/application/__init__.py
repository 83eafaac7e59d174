"""Application layer - services orchestrating domain rules."""
