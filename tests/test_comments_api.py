import pytest

from tests.helpers import CREATION_DATE, comment_payload


def test_add_comment(client):
    resp = client.post("/api/post/comment", json=comment_payload())
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"Message": "comment id: 123 successfully added", "Status": 200}


def test_add_duplicate_comment(client, app):
    client.post("/api/post/comment", json=comment_payload())
    resp = client.post("/api/post/comment", json=comment_payload(Comment="changed"))
    assert resp.status_code == 400
    assert resp.json() == {
        "Message": "Comment with id: 123 already exists in the database",
        "Status": 400,
    }
    assert len(app.state.comment_store) == 1
    assert app.state.comment_store.get_by_id(123).comment == "this is a comment"


@pytest.mark.parametrize(
    "body",
    [
        b'{"weird_payload": "weird value"}',
        b"not json at all",
        b"",
        b"[]",
        b'{"Id": 1, "PostId": 2, "Comment": "c", "Author": "a"}',
        b'{"Id": -1, "PostId": 2, "Comment": "c", "Author": "a", "CreationDate": "1970-01-01T03:46:40+01:00"}',
        b'{"Id": "1", "PostId": 2, "Comment": "c", "Author": "a", "CreationDate": "1970-01-01T03:46:40+01:00"}',
        b'{"Id": 1, "PostId": 2, "Comment": "c", "Author": "a", "CreationDate": "yesterday"}',
        b'{"Id": 1, "PostId": 2, "Comment": "c", "Author": "a", "CreationDate": 12345}',
        b'{"Id": 1, "PostId": 2, "Comment": "c", "Author": "a", "CreationDate": "1970-01-01"}',
        b'{"Id": 1, "PostId": 2, "Comment": "c", "Author": "a", "CreationDate": "1970-01-01T03:46:40"}',
    ],
)
def test_add_malformed_comment(client, app, body):
    resp = client.post("/api/post/comment", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"Message": "could not deserialize comment json payload", "Status": 400}
    assert len(app.state.comment_store) == 0


def test_comment_for_unknown_post_is_accepted(client):
    # PostId is not checked against the post store.
    resp = client.post("/api/post/comment", json=comment_payload(post_id=999))
    assert resp.status_code == 200


def test_list_comments_in_insertion_order(client):
    for comment_id, post_id in [(1, 101), (2, 202), (3, 101), (5, 101)]:
        resp = client.post(
            "/api/post/comment",
            json=comment_payload(comment_id=comment_id, post_id=post_id, Comment=f"comment{comment_id}"),
        )
        assert resp.status_code == 200

    resp = client.get("/api/get/comments/101")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    body = resp.json()
    assert [c["Id"] for c in body] == [1, 3, 5]
    assert body[0] == {
        "Id": 1,
        "PostId": 101,
        "Comment": "comment1",
        "Author": "blogger",
        "CreationDate": CREATION_DATE,
    }


def test_list_comments_empty(client):
    resp = client.get("/api/get/comments/4")
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.parametrize("raw", ["abc", "-1", "1.5", "18446744073709551616"])
def test_list_comments_bad_id(client, raw):
    resp = client.get(f"/api/get/comments/{raw}")
    assert resp.status_code == 400
    assert resp.json() == {"Message": f"wrong id path variable: {raw}", "Status": 400}
