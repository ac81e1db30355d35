"""Payload builders shared by the API and client tests."""

CREATION_DATE = "1970-01-01T03:46:40+01:00"


def post_payload(post_id=2, **overrides):
    payload = {
        "Id": post_id,
        "Title": "test title",
        "Content": "this is a post content",
        "CreationDate": CREATION_DATE,
    }
    payload.update(overrides)
    return payload


def comment_payload(comment_id=123, post_id=663, **overrides):
    payload = {
        "Id": comment_id,
        "PostId": post_id,
        "Comment": "this is a comment",
        "Author": "blogger",
        "CreationDate": CREATION_DATE,
    }
    payload.update(overrides)
    return payload
