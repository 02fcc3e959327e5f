"""Services package - store adapters and the summarization pipeline."""
