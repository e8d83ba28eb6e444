"""Virtual try-on studio: outfit staging, request building and outcome handling."""
