"""HTTP client, envelope decoding and pagination."""
