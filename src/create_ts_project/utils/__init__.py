"""Console, prompt and subprocess helpers shared by the core modules."""
