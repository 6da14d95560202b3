"""User interfaces for Conventio."""
