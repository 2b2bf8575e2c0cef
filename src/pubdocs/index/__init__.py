"""In-memory document index and its background refresh."""
