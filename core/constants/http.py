"""HTTP constants used by middleware and exception handlers."""

REQUEST_ID_HEADER = "X-Request-ID"
