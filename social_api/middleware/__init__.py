"""Middleware - metrics and error handling."""
