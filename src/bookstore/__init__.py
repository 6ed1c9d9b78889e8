"""Book Store API: author and book records with token-based login."""
