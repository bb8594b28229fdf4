"""Issues bouncer: unassign GitHub issues that stay assigned for too long."""

__version__ = "0.1.0"
