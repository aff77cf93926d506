"""Boys/girls round-robin football cup for school teams."""

__version__ = "0.1.0"
