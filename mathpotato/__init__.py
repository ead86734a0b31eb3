"""MathPotato: lexer, syntax tree, parser and command line for a small mathematics language."""

__version__ = "0.0.11"