"""AI roadmap generation."""
