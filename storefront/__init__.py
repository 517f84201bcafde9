"""Order persistence for the storefront domain model."""

__version__ = "0.1.0"
