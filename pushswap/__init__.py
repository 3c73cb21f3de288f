"""Sort integers on two stacks with a limited instruction set, and check instruction sequences."""

__version__ = "1.0.0"

__all__ = ["__version__"]