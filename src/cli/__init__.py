"""Command-line surface of the token wizard."""
