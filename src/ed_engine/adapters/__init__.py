"""UI adapters hosting the ed engine."""
