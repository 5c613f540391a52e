"""Common Application Components."""
