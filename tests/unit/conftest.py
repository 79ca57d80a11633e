"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from dockey import Document
from dockey._json import serialize_json

from tests.fakes.fake_evaluator import FakeEvaluator

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def fake_evaluator() -> FakeEvaluator:
    """Provide a fresh FakeEvaluator instance for each test.

    The FakeEvaluator can be injected into Document to feed arbitrary
    matched nodes to the flattening logic without going through path
    evaluation.

    Returns:
        A new FakeEvaluator with no scripted results.

    Example:
        def test_with_fake(fake_evaluator: FakeEvaluator) -> None:
            fake_evaluator.set_result("x", [1, 2])
            doc = Document("{}", _evaluator=fake_evaluator)
            assert doc.values_at_path("x") == [1.0, 2.0]
    """
    return FakeEvaluator()


@pytest.fixture
def make_document() -> "Callable[..., Document]":
    """Factory fixture for creating Document instances.

    Accepts a JSON string, raw bytes, or any JSON-compatible Python value
    (which is serialized first).

    Returns:
        A callable that creates Document instances.

    Example:
        def test_extract(make_document) -> None:
            doc = make_document({"name": "alice"})
            assert doc.values_at_path("name") == ["alice"]
    """
    def create_document(
        content: object,
        *,
        _evaluator: FakeEvaluator | None = None,
    ) -> Document:
        if isinstance(content, (str, bytes)):
            return Document(content, _evaluator=_evaluator)
        return Document(serialize_json(content), _evaluator=_evaluator)

    return create_document
