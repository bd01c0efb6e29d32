"""Static type chart and curated Pokemon tables."""
