"""
Pydantic schema definitions for API payloads.

Posts and comments are validated from, and written back to, JSON
using the capitalised keys of the public wire format (``Id``,
``PostId``, ``CreationDate`` and so on).  Python code uses the
snake_case attribute names; the mapping lives in field aliases.
"""
