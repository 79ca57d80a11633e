"""Benchmark data generators for dockey benchmarks.

This module provides deterministic data generation functions for benchmark
tests. All generators use seeded random instances for reproducibility.
"""

import random
from typing import Literal

from dockey import Document
from dockey._json import serialize_json
from dockey._types import JSONObject, JSONValue

DocumentSize = Literal["small", "medium", "large"]

_WORDS = [
    "alpha",
    "bravo",
    "charlie",
    "delta",
    "echo",
    "foxtrot",
    "golf",
    "hotel",
    "India",
    "Juliett",
    "kilo",
    "Lima",
]

_TAG_COUNTS: dict[DocumentSize, int] = {"small": 4, "medium": 64, "large": 1024}


def generate_sentence(rng: random.Random, word_count: int) -> str:
    """Generate whitespace-separated text with irregular spacing.

    Args:
        rng: Seeded random instance.
        word_count: Number of words in the sentence.

    Returns:
        The generated text.
    """
    gaps = [" ", "  ", "\t", "\n"]
    return "".join(rng.choice(_WORDS) + rng.choice(gaps) for _ in range(word_count))


def generate_record(size: DocumentSize, index: int) -> JSONObject:
    """Generate a deterministic record of the given size.

    Records carry a text field, a numeric field, a nested object, an array
    of tags mixed with nulls, and an array of nested arrays of numbers.

    Args:
        size: Controls the length of the array fields.
        index: Seed for the record contents.

    Returns:
        A JSON object.
    """
    rng = random.Random(index)
    tag_count = _TAG_COUNTS[size]
    tags: list[JSONValue] = [
        None if i % 7 == 0 else rng.choice(_WORDS) for i in range(tag_count)
    ]
    readings: list[JSONValue] = [
        [rng.uniform(-1000.0, 1000.0) for _ in range(4)]
        for _ in range(tag_count // 4 + 1)
    ]
    return {
        "id": f"doc_{index:08d}",
        "score": rng.randint(0, 1_000_000),
        "owner": {"name": rng.choice(_WORDS), "rank": index % 10},
        "tags": tags,
        "readings": readings,
        "summary": generate_sentence(rng, tag_count),
        "friends": [{"name": rng.choice(_WORDS)} for _ in range(tag_count)],
    }


def generate_document(size: DocumentSize, index: int = 0) -> Document:
    """Generate a deterministic document of the given size."""
    return Document(serialize_json(generate_record(size, index)))


def generate_documents(size: DocumentSize, count: int) -> list[Document]:
    """Generate a list of deterministic documents."""
    return [generate_document(size, i) for i in range(count)]
