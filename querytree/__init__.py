"""Tokenize and parse boolean search queries into constraint trees."""

__version__ = "0.1.0"

__all__ = ["cli", "expression", "parser", "tokenizer"]