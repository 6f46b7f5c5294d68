"""Configuration and startup validation."""
