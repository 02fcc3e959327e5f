"""HTTP-level tests: status codes, payload shapes and error translation."""

import httpx
from google.genai import errors as genai_errors

from blogsum.agents import ContentExtractor, DictionaryTranslator, GeminiClient, Summarizer
from blogsum.config import Settings
from blogsum.constants.urdu import URDU_UI_MESSAGES
from blogsum.exceptions import FetchError, HttpError, StoreConnectionError
from blogsum.services.pipeline import SummarizationPipeline

URL = "https://example.com/post"
API = "/api/v1"


def serving(html: str) -> ContentExtractor:
    """A real extractor whose HTTP client always returns ``html``."""
    transport = httpx.MockTransport(lambda request: httpx.Response(200, html=html))
    return ContentExtractor(
        Settings(_env_file=None),
        http_client=httpx.AsyncClient(transport=transport),
    )


class TestSummarizeEndpoint:
    def test_returns_aggregate_result(self, make_pipeline, client_for, calls):
        client = client_for(make_pipeline(text="Hello world."))

        response = client.post(f"{API}/summarize", json={"url": URL})

        assert response.status_code == 200
        assert response.json() == {
            "url": URL,
            "originalText": "Hello world.",
            "summary": "Summary of: Hello world.",
            "urduSummary": "اردو: Summary of: Hello world.",
        }
        assert len(calls) == 5

    def test_missing_url_is_400(self, make_pipeline, client_for, calls):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/summarize", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "URL is required"}
        assert calls == []

    def test_step_failure_reports_step_message_and_cause(self, make_pipeline, client_for):
        client = client_for(make_pipeline(extract_error=HttpError("Forbidden", upstream_status=403)))

        response = client.post(f"{API}/summarize", json={"url": URL})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to scrape blog content.",
            "error": "Forbidden",
            "upstreamStatus": 403,
        }

    def test_persistence_failure_hides_partial_results(self, make_pipeline, client_for):
        client = client_for(make_pipeline(full_text_error=StoreConnectionError("DynamoDB is unreachable")))

        response = client.post(f"{API}/summarize", json={"url": URL})

        assert response.status_code == 500
        body = response.json()
        assert body == {"message": "Failed to save full text.", "error": "DynamoDB is unreachable"}

    def test_error_message_is_localized_for_urdu_clients(self, make_pipeline, client_for):
        client = client_for(make_pipeline(extract_error=FetchError("Could not resolve host")))

        response = client.post(
            f"{API}/summarize",
            json={"url": URL},
            headers={"Accept-Language": "ur-PK,ur;q=0.9,en;q=0.8"},
        )

        assert response.status_code == 500
        assert response.json()["message"] == URDU_UI_MESSAGES["Failed to scrape blog content."]
        assert response.json()["error"] == "Could not resolve host"

    def test_unparseable_url_is_400_json(self, make_pipeline, client_for, calls):
        pipeline = make_pipeline()
        pipeline.extractor = serving("<article>Hello</article>")
        client = client_for(pipeline)

        response = client.post(f"{API}/summarize", json={"url": "http://[::1/post"})

        assert response.status_code == 400
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"message": "URL must be an absolute http(s) URL"}
        assert calls == []

    def test_page_without_text_is_extraction_failure(self, make_pipeline, client_for, calls):
        pipeline = make_pipeline()
        pipeline.extractor = serving("<html><body><img></body></html>")
        client = client_for(pipeline)

        response = client.post(f"{API}/summarize", json={"url": URL})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to scrape blog content.",
            "error": "No text content found",
        }
        assert calls == []

    def test_empty_summary_is_summarization_failure(self, make_pipeline, client_for):
        pipeline = make_pipeline()

        async def empty_summary(text: str) -> str:
            return ""

        pipeline.summarizer.summarize = empty_summary
        client = client_for(pipeline)

        response = client.post(f"{API}/summarize", json={"url": URL})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to generate AI summary.",
            "error": "Summarizer returned no text",
        }


class TestScrapeEndpoint:
    def test_returns_original_content(self, make_pipeline, client_for):
        client = client_for(make_pipeline(text="Hello world."))

        response = client.post(f"{API}/scrape", json={"url": URL})

        assert response.status_code == 200
        assert response.json() == {"originalContent": "Hello world."}

    def test_missing_url_is_400(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/scrape", json={"url": ""})

        assert response.status_code == 400
        assert response.json() == {"message": "URL is required"}

    def test_malformed_body_is_400(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(
            f"{API}/scrape",
            content=b"not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request."


class TestGenerationEndpoints:
    def test_upstream_503_is_500_with_upstream_message(self, settings, fake_genai, make_pipeline, client_for):
        error = genai_errors.ServerError(
            503,
            {"error": {"code": 503, "message": "The model is overloaded.", "status": "UNAVAILABLE"}},
        )
        pipeline = make_pipeline()
        pipeline.summarizer = Summarizer(GeminiClient(settings, client=fake_genai(error=error)))
        client = client_for(pipeline)

        response = client.post(f"{API}/summarize-ai", json={"textToSummarize": "Some text"})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to generate AI summary.",
            "error": "The model is overloaded.",
            "upstreamStatus": 503,
        }

    def test_summarize_ai_returns_summary(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/summarize-ai", json={"textToSummarize": "Some text"})

        assert response.status_code == 200
        assert response.json() == {"summary": "Summary of: Some text"}

    def test_summarize_ai_requires_text(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/summarize-ai", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "Text to summarize is required"}

    def test_translate_with_dictionary_backend(self, make_pipeline, client_for):
        pipeline: SummarizationPipeline = make_pipeline()
        pipeline.translator = DictionaryTranslator()
        client = client_for(pipeline)

        response = client.post(
            f"{API}/translate-urdu",
            json={"textToTranslate": "Thank you for using the Blog Summarizer!"},
        )

        assert response.status_code == 200
        assert response.json() == {"translatedText": "بلاگ سمرائزر استعمال کرنے کا شکریہ!"}

    def test_missing_credential_is_reported_as_failure(self, make_pipeline, client_for):
        from blogsum.agents import GeminiTranslator
        from blogsum.config import Settings

        pipeline = make_pipeline()
        pipeline.translator = GeminiTranslator(GeminiClient(Settings(_env_file=None, gemini_api_key="")))
        client = client_for(pipeline)

        response = client.post(f"{API}/translate-urdu", json={"textToTranslate": "Hello"})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to translate text.",
            "error": "Gemini API key is not configured.",
        }


class TestStorageEndpoints:
    def test_save_full_text_is_201(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/save-full-text", json={"url": URL, "content": "Full text"})

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Full text saved successfully"
        assert body["data"]["url"] == URL
        assert body["data"]["content"] == "Full text"

    def test_save_full_text_requires_both_fields(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/save-full-text", json={"url": URL})

        assert response.status_code == 400
        assert response.json() == {"message": "URL and content are required"}

    def test_save_summary_then_read_back(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        saved = client.post(
            f"{API}/save-summary",
            json={"url": URL, "summary": "A summary", "urduSummary": "ایک خلاصہ"},
        )
        listed = client.get(f"{API}/summaries", params={"url": URL})

        assert saved.status_code == 201
        assert saved.json()["data"]["summaryText"] == "A summary"
        assert listed.status_code == 200
        [record] = listed.json()["records"]
        assert record["url"] == URL
        assert record["summaryText"] == "A summary"
        assert record["urduSummary"] == "ایک خلاصہ"

    def test_save_summary_requires_all_fields(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.post(f"{API}/save-summary", json={"url": URL, "summary": "A summary"})

        assert response.status_code == 400
        assert response.json() == {"message": "URL, summary, and Urdu summary are required"}

    def test_list_full_texts_requires_url(self, make_pipeline, client_for):
        client = client_for(make_pipeline())

        response = client.get(f"{API}/full-texts")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request."
