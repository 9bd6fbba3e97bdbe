"""Concurrent access tests.

Tests for thread safety of JsonParser:
- One parser instance shared by many threads
- Failure tracking never leaks between concurrent parses
- Consistent results across threads

Structure:
    - TestConcurrentParseBasic: Essential tests (run in every CI build)
    - TestConcurrentParseIntensive: Property-based tests (fuzz-marked)
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from hypothesis import given, settings

from jparse import JsonParser
from jparse.diagnostics import JsonSyntaxError
from tests.strategies import json_documents

# =============================================================================
# Essential Concurrency Tests (Run in every CI build)
# =============================================================================


class TestConcurrentParseBasic:
    """Essential thread safety tests that run in every CI build."""

    def test_concurrent_same_document(self) -> None:
        """Multiple threads parsing the same document with one parser."""
        parser = JsonParser()
        source = '{"Names": ["Javvy", "Jav", "Boy"], "Age": 4}'

        results: list[object] = []
        lock = threading.Lock()

        def parse_document() -> None:
            value = parser.parse(source)
            with lock:
                results.append(value)

        threads = [threading.Thread(target=parse_document) for _ in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 20
        assert all(r == {"Names": ["Javvy", "Jav", "Boy"], "Age": 4.0} for r in results)

    def test_concurrent_errors_report_own_position(self) -> None:
        """Each failing parse reports its own furthest failure."""
        parser = JsonParser()
        sources = {f"[{'1,' * i}]": 1 + 2 * i for i in range(1, 30)}

        def failure_position(source: str) -> int:
            _, errors = parser.try_parse(source)
            assert len(errors) == 1
            return errors[0].position

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(failure_position, s): s for s in sources}
            for future in as_completed(futures):
                assert future.result() == sources[futures[future]]

    def test_mixed_success_and_failure(self) -> None:
        """Valid and invalid documents interleaved across threads."""
        parser = JsonParser()
        documents = ["[1, 2]", "[1, 2,]", '{"a": null}', '{"a" null}'] * 10

        def run(source: str) -> bool:
            try:
                parser.parse(source)
            except JsonSyntaxError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as executor:
            outcomes = list(executor.map(run, documents))

        assert outcomes == [True, False, True, False] * 10


# =============================================================================
# Intensive Concurrency Tests (fuzz-marked)
# =============================================================================


@pytest.mark.fuzz
class TestConcurrentParseIntensive:
    """Property-based concurrency tests; run with: pytest -m fuzz"""

    @settings(max_examples=100, deadline=None)
    @given(json_documents())
    def test_threads_agree_with_single_thread(self, document: tuple[str, object]) -> None:
        """PROPERTY: concurrent parses equal the sequential parse."""
        source, _ = document
        parser = JsonParser()
        expected = parser.parse(source)

        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(parser.parse, [source] * 8))

        assert all(r == expected for r in results)
