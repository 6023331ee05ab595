"""Unit tests for row/document mappers."""

from datetime import datetime
from uuid import uuid4

from feed.persistence.mappers import comment_to_doc, post_to_dict, row_to_post
from tests.conftest import make_comment, make_post


def test_row_to_post_reads_jsonb_documents():
    """Embedded documents come back from JSONB as plain strings."""
    post_id = uuid4()
    author_id = uuid4()
    liker = uuid4()
    comment_id = uuid4()
    created = datetime(2024, 5, 1, 12, 0, 0)

    post = row_to_post(
        {
            "id": post_id,
            "text": "Hello",
            "name": "Ada",
            "avatar": None,
            "author_id": author_id,
            "created_at": created,
            "likes": [{"user_id": str(liker)}],
            "comments": [
                {
                    "id": str(comment_id),
                    "text": "Hi",
                    "name": "Bob",
                    "avatar": "bob.png",
                    "created_at": "2024-05-01T12:30:00",
                }
            ],
        }
    )

    assert post.id == post_id
    assert post.likes[0].user_id == liker
    assert post.comments[0].id == comment_id
    assert post.comments[0].created_at == datetime(2024, 5, 1, 12, 30, 0)


def test_row_to_post_treats_null_arrays_as_empty():
    post = row_to_post(
        {
            "id": uuid4(),
            "text": "Hello",
            "name": "Ada",
            "author_id": uuid4(),
            "created_at": datetime.now(),
            "likes": None,
            "comments": None,
        }
    )

    assert post.likes == []
    assert post.comments == []


def test_post_to_dict_serializes_documents_as_json():
    liker = uuid4()
    comment = make_comment()
    post = make_post(likes=[liker], comments=[comment])

    row = post_to_dict(post)

    assert row["likes"] == [{"user_id": str(liker)}]
    assert row["comments"] == [comment_to_doc(comment)]
    assert row["comments"][0]["id"] == str(comment.id)
    assert row_to_post(row) == post
