"""Location HTTP Presentation."""
