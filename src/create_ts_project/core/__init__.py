"""Core implementations for create-ts-project."""
