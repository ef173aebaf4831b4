"""Business logic that sits between the prompts and the terminal."""
