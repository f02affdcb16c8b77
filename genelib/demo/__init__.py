"""Demonstration programs built on the GeneLib engine."""

from .word_guess import WordGuessProblem, WordGuessResult, run_word_guess, valid_word

__all__ = ["WordGuessProblem", "WordGuessResult", "run_word_guess", "valid_word"]
