"""Blog summarizer backend: scrape a post, summarize it, translate to Urdu, store both."""

__version__ = "0.1.0"
