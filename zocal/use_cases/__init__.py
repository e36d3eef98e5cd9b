"""Calendar engine use cases."""
