"""Database Package — declarative Base and session factory for scripts and migrations."""
