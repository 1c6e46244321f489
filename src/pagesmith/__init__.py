"""
pagesmith - static HTML site builder

pagesmith expands `<include>` directives in page files into reusable
component fragments, substitutes `{{ name }}` placeholders from the
directive's attributes, and writes the resulting site to an output directory.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
