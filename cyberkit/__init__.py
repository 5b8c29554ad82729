"""Tokenizers, vocabularies, SentencePiece segmentation and NLP task post-processing."""

__version__ = "0.1.0"