"""Password batch generation and its interactive shell."""
