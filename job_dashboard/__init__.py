"""Job Search Dashboard: resume-driven job search with in-memory filtering."""

__version__ = "1.0.0"
