"""AI system design builder backend: diagram synthesis and merge engine."""

__version__ = "1.0.0"
