"""HTTP API for polling job status and fetching results."""
