"""HTTP service and CLI surfaces for the chat gateway."""
