"""punctfix — full-width CJK punctuation normalizer for text and HTML."""

__version__ = "0.3.0"
