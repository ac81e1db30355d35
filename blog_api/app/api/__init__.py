"""
HTTP layer of the blog API.

``router`` aggregates the endpoint modules in ``endpoints``; ``deps``
holds the dependencies those endpoints share.
"""
