"""
Bag-of-words TF-IDF vectors and cosine similarity.

The IDF table comes from scikit-learn's TfidfVectorizer fitted on
pre-tokenized documents; vectors are exposed as plain term -> weight dicts.
The IDF table is built once per corpus and shared read-only by every
vectorization against that corpus.
"""

from collections import Counter
from typing import Dict, Iterable, List, Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as pairwise_cosine

Vector = Dict[str, float]


def _identity(tokens: List[str]) -> List[str]:
    return tokens


def build_idf(corpus: Sequence[Sequence[str]]) -> Dict[str, float]:
    """
    Build a smoothed inverse-document-frequency table.

    idf = ln((N + 1) / (df + 1)) + 1, so every term gets a strictly
    positive weight, including terms present in all documents.

    Args:
        corpus: Tokenized documents

    Returns:
        Mapping of term to idf, empty when the corpus has no tokens
    """
    docs = [list(tokens) for tokens in corpus]
    if not any(docs):
        return {}

    vectorizer = TfidfVectorizer(
        analyzer=_identity,
        lowercase=False,
        norm=None,
        use_idf=True,
        smooth_idf=True,
        sublinear_tf=False
    )
    vectorizer.fit(docs)
    return {
        term: float(vectorizer.idf_[index])
        for term, index in vectorizer.vocabulary_.items()
    }


def vectorize(tokens: Iterable[str], idf: Dict[str, float]) -> Vector:
    """
    Weight raw term frequencies by idf.

    Terms missing from the idf table are left out of the vector.
    """
    tf = Counter(tokens)
    return {
        term: freq * idf[term]
        for term, freq in tf.items()
        if idf.get(term, 0.0) > 0.0
    }


def cosine_similarity(vec_a: Vector, vec_b: Vector) -> float:
    """
    Cosine similarity of two non-negative sparse vectors.

    Returns 0.0 when either vector has zero norm and exactly 1.0 for
    identical non-zero vectors.
    """
    terms = sorted(set(vec_a) | set(vec_b))
    if not terms:
        return 0.0

    a = np.array([[vec_a.get(term, 0.0) for term in terms]])
    b = np.array([[vec_b.get(term, 0.0) for term in terms]])
    if not a.any() or not b.any():
        return 0.0
    if np.array_equal(a, b):
        return 1.0

    similarity = float(pairwise_cosine(a, b)[0, 0])
    return max(0.0, min(1.0, similarity))
