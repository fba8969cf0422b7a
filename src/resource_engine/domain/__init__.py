"""Domain layer - value objects, requests, results and ports."""
