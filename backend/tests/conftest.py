"""Shared fixtures: settings, in-process fakes for every collaborator, API client."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient
from google.genai import types

from blogsum.config import Settings
from blogsum.models import ExtractedContent, FullTextRecord, SummaryRecord


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        request_timeout_seconds=5.0,
    )


# ==================== Gemini SDK fakes ====================


class FakeModels:
    """Stands in for ``genai.Client().aio.models``."""

    def __init__(self, response: Any = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_content(self, *, model: str, contents: Any, config: Any = None) -> Any:
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


def text_response(text: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))
        ]
    )


@pytest.fixture
def fake_genai() -> Callable[..., SimpleNamespace]:
    """
    Build a fake SDK client.

    Example:
        client = fake_genai(text="A summary")
        client = fake_genai(error=some_api_error)
    """

    def factory(text: str | None = None, response: Any = None, error: Exception | None = None):
        if response is None and text is not None:
            response = text_response(text)
        models = FakeModels(response=response, error=error)
        return SimpleNamespace(aio=SimpleNamespace(models=models), models=models)

    return factory


# ==================== Pipeline collaborator fakes ====================


class RecordingFake:
    """Base for fakes that log calls into a shared list and may fail on demand."""

    def __init__(self, calls: list[tuple], error: Exception | None = None):
        self.calls = calls
        self.error = error

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error


class FakeExtractor(RecordingFake):
    def __init__(self, calls, error=None, text: str = "Hello world."):
        super().__init__(calls, error)
        self.text = text

    async def extract(self, url: str) -> ExtractedContent:
        self._record("extract", url)
        return ExtractedContent(source_url=url, text=self.text)

    async def close(self) -> None:
        pass


class FakeSummarizer(RecordingFake):
    async def summarize(self, text: str) -> str:
        self._record("summarize", text)
        return f"Summary of: {text}"


class FakeTranslator(RecordingFake):
    name = "fake"

    async def translate(self, text: str) -> str:
        self._record("translate", text)
        return f"اردو: {text}"


class FakeFullTextStore(RecordingFake):
    def __init__(self, calls, error=None):
        super().__init__(calls, error)
        self.records: list[FullTextRecord] = []

    async def save(self, url: str, content: str) -> FullTextRecord:
        self._record("save_full_text", url, content)
        record = FullTextRecord(url=url, content=content, timestamp=datetime.now(UTC), record_id="r1")
        self.records.append(record)
        return record

    async def list_by_url(self, url: str, limit: int = 20) -> list[FullTextRecord]:
        return [r for r in reversed(self.records) if r.url == url][:limit]


class FakeSummaryStore(RecordingFake):
    def __init__(self, calls, error=None):
        super().__init__(calls, error)
        self.records: list[SummaryRecord] = []

    async def save(self, url: str, summary: str, urdu_summary: str) -> SummaryRecord:
        self._record("save_summary", url, summary, urdu_summary)
        record = SummaryRecord(url=url, summary_text=summary, urdu_summary=urdu_summary)
        self.records.append(record)
        return record

    async def list_by_url(self, url: str, limit: int = 20) -> list[SummaryRecord]:
        return [r for r in reversed(self.records) if r.url == url][:limit]


@pytest.fixture
def calls() -> list[tuple]:
    return []


@pytest.fixture
def make_pipeline(calls):
    """
    Build a pipeline whose collaborators are recording fakes.

    Pass ``<step>_error=`` to make a collaborator raise, e.g.
    ``make_pipeline(translate_error=UpstreamError("boom"))``.
    """
    from blogsum.services.pipeline import SummarizationPipeline

    def factory(
        extract_error=None,
        summarize_error=None,
        translate_error=None,
        full_text_error=None,
        summary_error=None,
        text: str = "Hello world.",
    ) -> SummarizationPipeline:
        return SummarizationPipeline(
            extractor=FakeExtractor(calls, extract_error, text=text),
            summarizer=FakeSummarizer(calls, summarize_error),
            translator=FakeTranslator(calls, translate_error),
            full_text_store=FakeFullTextStore(calls, full_text_error),
            summary_store=FakeSummaryStore(calls, summary_error),
        )

    return factory


@pytest.fixture
def client_for() -> Generator[Callable[..., TestClient], None, None]:
    """
    Return a factory that serves the app with ``get_pipeline`` overridden.

    The lifespan is not started, so no database or DynamoDB is touched.
    """
    from blogsum.api.deps import get_pipeline
    from blogsum.main import app

    def factory(pipeline) -> TestClient:
        app.dependency_overrides[get_pipeline] = lambda: pipeline
        return TestClient(app)

    try:
        yield factory
    finally:
        app.dependency_overrides.clear()
