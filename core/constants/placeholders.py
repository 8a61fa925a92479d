"""Placeholder registry constants.

This module defines every token that may appear in the reply notification
subject and message templates. Used by the placeholder listing endpoint and
by the notifier when building the substitution table.
"""

POST_TITLE = "%post_title%"
POST_URL = "%post_url%"
ORIGINAL_COMMENT_URL = "%original_comment_url%"
REPLY_COMMENT_URL = "%reply_comment_url%"
ORIGINAL_COMMENT_CONTENT = "%original_comment_content%"
REPLY_COMMENT_CONTENT = "%reply_comment_content%"
ORIGINAL_COMMENT_AUTHOR = "%original_comment_author%"
REPLY_COMMENT_AUTHOR = "%reply_comment_author%"

PLACEHOLDER_REGISTRY = [
    {
        "token": POST_TITLE,
        "description": "Title of the blog post the comment was made on.",
    },
    {
        "token": POST_URL,
        "description": "URL to the blog post the comment was made on.",
    },
    {
        "token": ORIGINAL_COMMENT_URL,
        "description": "URL to the original comment.",
    },
    {
        "token": REPLY_COMMENT_URL,
        "description": "URL to the new reply comment.",
    },
    {
        "token": ORIGINAL_COMMENT_CONTENT,
        "description": "Content of the original comment.",
    },
    {
        "token": REPLY_COMMENT_CONTENT,
        "description": "Content of the new reply comment.",
    },
    {
        "token": ORIGINAL_COMMENT_AUTHOR,
        "description": "Name of the original comment author.",
    },
    {
        "token": REPLY_COMMENT_AUTHOR,
        "description": "Name of the new reply comment author.",
    },
]

PLACEHOLDER_TOKENS = tuple(entry["token"] for entry in PLACEHOLDER_REGISTRY)
