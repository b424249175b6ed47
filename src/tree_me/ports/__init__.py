"""Port definitions for external collaborators."""
