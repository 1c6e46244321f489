"""Shared test helpers for pagesmith tests."""
from .site import DEFAULT_COMPONENTS, DEFAULT_PAGES, write_component, write_site

__all__ = ["DEFAULT_COMPONENTS", "DEFAULT_PAGES", "write_component", "write_site"]
