"""
flesch_kincaid package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import KincaidConfig, config_from_dict, config_from_yaml, load_config
from .engine import Kincaid
from .models import CorpusReadability, Document, DocumentReadability, TextMetrics
from .patterns import PatternCompileError
from .pipeline import process_corpus, process_document
from .scoring import GradeLevel, NoDataError, ReadingEase, Scorer

__all__ = [
    "KincaidConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Kincaid",
    "Scorer",
    "ReadingEase",
    "GradeLevel",
    "NoDataError",
    "PatternCompileError",
    "TextMetrics",
    "Document",
    "DocumentReadability",
    "CorpusReadability",
    "process_corpus",
    "process_document",
]

__version__ = "0.1.0"
