"""
Use cases for the card catalogue API.

Routers call these services instead of touching the stores directly; services
raise errors from cards_api.core.errors and never build HTTP responses.
"""
