"""Static site builder with a bounded-concurrency task pool."""

__version__ = "0.1.0"
