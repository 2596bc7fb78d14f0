"""roleperm - role and permission based access control with user overrides."""

__version__ = "0.1.0"
