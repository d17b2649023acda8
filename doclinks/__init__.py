"""Javadoc link and offline-link resolution for build tooling."""

__version__ = "1.0.0"
