"""EMPOWER learning roadmap engine."""
