"""Classic algorithms, matrix arithmetic, rate and Elo rating maths, and concurrency patterns."""

__version__ = "0.1.0"