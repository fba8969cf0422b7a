"""Configuration - settings loading, schemas and target configuration helpers."""
