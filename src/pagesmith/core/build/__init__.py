"""Site build driver: output lifecycle, assets, CSS, and page rendering."""
from .site import PAGE_SUFFIX, SiteBuilder

__all__ = ["PAGE_SUFFIX", "SiteBuilder"]
