"""Process invocation gateway."""
