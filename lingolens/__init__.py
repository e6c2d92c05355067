"""
LingoLens - document text extraction, translation and summarization.
"""

__version__ = "0.1.0"
