"""Text-level grammar and range shorthand rewriting."""
