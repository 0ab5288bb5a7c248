"""Paginated PDF layout engine and export API for structured resumes."""

__version__ = "0.1.0"
