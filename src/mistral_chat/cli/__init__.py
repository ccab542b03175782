"""Command-line interface for mistral_chat."""
