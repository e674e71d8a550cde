"""WalkAround Checks : inspection quotidienne des véhicules."""

__version__ = "1.0.0"
