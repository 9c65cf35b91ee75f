"""wordg: a Wordle oracle (scores guesses) and solver (deduces the word)."""

__version__ = "0.1.0"
