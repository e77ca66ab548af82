"""Health-assistant API: accounts, medical profile, AI artifacts and provider search."""
