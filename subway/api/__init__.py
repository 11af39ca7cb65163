"""Request schemas and response serializers for the HTTP API."""
