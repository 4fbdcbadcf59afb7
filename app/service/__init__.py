"""Use-case layer between the HTTP routes and the pure domain."""
