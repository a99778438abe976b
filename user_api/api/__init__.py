"""
API layer for the User API.

Exposes the users resource under /v1/users and maps domain errors to
HTTP responses.
"""
