"""Exception hierarchy shared by the extractor, generative backend, stores and pipeline."""


class BlogSummarizerError(Exception):
    """Base exception for the blog summarizer.

    ``message`` is the human-readable description that ends up in the
    ``error`` field of API error payloads.
    """

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(BlogSummarizerError):
    """Missing or malformed input. Client fault."""

    status_code = 400


class ConfigurationError(BlogSummarizerError):
    """A required setting (e.g. an API credential) is absent. Operator fault."""


class UpstreamError(BlogSummarizerError):
    """A collaborator was unreachable or rejected the call."""

    def __init__(self, message: str, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        super().__init__(message)


class FetchError(UpstreamError):
    """Network, DNS or connection failure while fetching a page."""


class HttpError(UpstreamError):
    """The fetched page answered with a non-2xx status."""

    def __init__(self, message: str, upstream_status: int):
        super().__init__(message, upstream_status=upstream_status)


class UpstreamTimeoutError(BlogSummarizerError):
    """An external call did not finish within the configured timeout."""


class ParseError(BlogSummarizerError):
    """A fetched body could not be parsed as HTML."""


class MalformedResponseError(BlogSummarizerError):
    """A collaborator succeeded but returned data we cannot use."""


class PersistenceError(BlogSummarizerError):
    """A store write or read failed."""


class StoreConnectionError(PersistenceError):
    """The backing store is unreachable."""


class WriteError(PersistenceError):
    """The backing store reported a failure other than connectivity."""


class PipelineError(BlogSummarizerError):
    """Failure of one pipeline step, tagged with the step and its cause.

    ``message`` is the step's public message; the collaborator's own
    message is kept on ``cause``.
    """

    step = "pipeline"
    public_message = "Failed to summarize the blog."

    def __init__(self, cause: BlogSummarizerError):
        self.cause = cause
        super().__init__(self.public_message)

    @property
    def upstream_status(self) -> int | None:
        return getattr(self.cause, "upstream_status", None)


class ExtractionError(PipelineError):
    step = "extract"
    public_message = "Failed to scrape blog content."


class SummarizationError(PipelineError):
    step = "summarize"
    public_message = "Failed to generate AI summary."


class TranslationError(PipelineError):
    step = "translate"
    public_message = "Failed to translate text."


class FullTextPersistenceError(PipelineError, PersistenceError):
    step = "save_full_text"
    public_message = "Failed to save full text."


class SummaryPersistenceError(PipelineError, PersistenceError):
    step = "save_summary"
    public_message = "Failed to save summary."
