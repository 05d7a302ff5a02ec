"""Infrastructure layer: configuration, logging, exceptions, GitHub adapter."""
