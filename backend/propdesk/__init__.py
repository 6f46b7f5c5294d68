"""PropDesk: property management screens over static sample data."""
