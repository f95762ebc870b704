from __future__ import annotations

import logging
from typing import List

from .engine import Kincaid
from .models import CorpusReadability, Document, DocumentReadability, TextMetrics
from .scoring import NoDataError, Scorer

logger = logging.getLogger(__name__)

CORPUS_DOC_ID = "*corpus*"


def process_document(doc: Document, engine: Kincaid) -> DocumentReadability:
    """Measure and score a single document."""
    scorer = engine.scorer()
    scorer.add(doc.text)
    result = _readability_from_scorer(doc.doc_id, scorer)
    if result.reading_ease is not None:
        logger.info(
            "Scored %s: %d words, reading ease %.2f",
            doc.doc_id,
            result.metrics.words,
            result.reading_ease.value,
        )
    return result


def process_corpus(documents: List[Document], engine: Kincaid) -> CorpusReadability:
    """
    Score every document on its own and the corpus as one combined text.

    The combined result sums each document's counts instead of scoring the
    concatenated text, so a missing terminal mark at the end of one file
    never merges its last sentence with the next file's first.
    """
    results: List[DocumentReadability] = []
    combined = engine.scorer()
    for document in documents:
        result = process_document(document, engine)
        combined.add_metrics(result.metrics)
        results.append(result)

    logger.info(
        "Scored %d documents (%d words total)", len(results), combined.totals.words
    )
    return CorpusReadability(
        documents=results,
        combined=_readability_from_scorer(CORPUS_DOC_ID, combined),
    )


def _readability_from_scorer(doc_id: str, scorer: Scorer) -> DocumentReadability:
    totals: TextMetrics = scorer.totals
    try:
        reading_ease = scorer.reading_ease()
        grade_level = scorer.grade_level()
    except NoDataError:
        logger.info("%s has no words; leaving its scores undefined.", doc_id)
        return DocumentReadability(doc_id=doc_id, metrics=totals)
    return DocumentReadability(
        doc_id=doc_id,
        metrics=totals,
        reading_ease=reading_ease,
        grade_level=grade_level,
    )
