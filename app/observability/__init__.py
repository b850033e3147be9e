"""Request/response logging for the demo service.

structlog handles rendering; the request logger itself is a plain ASGI
middleware so it can wrap every stage of the application, including
Starlette's own middleware.
"""
