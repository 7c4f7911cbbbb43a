"""Analysis and optimisation of split keyboard layouts against a text corpus."""

__version__ = "0.1.0"