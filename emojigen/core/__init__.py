"""Core models and errors shared across the generator."""
