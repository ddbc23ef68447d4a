"""Error taxonomy for calls to the generation service."""
