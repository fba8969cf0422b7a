"""Infrastructure layer - logging, transport and registry implementations."""
