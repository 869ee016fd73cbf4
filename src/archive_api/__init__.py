"""Media and document archive API."""
