"""Static sample data."""
