"""
Core pipeline: extraction, language identification, translation,
summarization and word annotation.
"""

from .pipeline import DocumentPipeline, process
from .compare import DocumentComparison, compare

__all__ = ['DocumentPipeline', 'process', 'DocumentComparison', 'compare']
