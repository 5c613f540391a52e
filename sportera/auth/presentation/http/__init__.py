"""Auth HTTP Presentation."""
