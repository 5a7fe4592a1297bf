"""Desktop app package."""
