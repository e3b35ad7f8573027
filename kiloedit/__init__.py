"""A small terminal text editor with Emacs-style keys and syntax highlighting."""

__version__ = "0.1.0"