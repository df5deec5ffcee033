"""MongoDB connection and request/response schemas."""
