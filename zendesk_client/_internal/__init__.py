"""Internal modules for the Zendesk client.

WARNING: Nothing here is part of the public API.

Modules:
    http - Shared HTTP client configuration
    resource - Request/response pipeline shared by all resources
    errors - HTTP status to exception mapping
    redaction - Scrubbing request bodies for logs
"""
