"""External-collaborator services for the Tidemark assessment engine."""
