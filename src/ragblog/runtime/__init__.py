"""Runtime: middleware chain and observability."""
