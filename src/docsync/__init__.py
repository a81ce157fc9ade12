"""Synchronize package README files into a Docusaurus documentation tree."""

__version__ = "0.1.0"
