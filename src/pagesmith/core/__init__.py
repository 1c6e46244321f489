"""Core building blocks: composition engine, configuration, and site build."""
