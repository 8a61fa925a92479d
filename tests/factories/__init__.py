"""Factory classes for test data generation.

Posts, comments and options are host-owned rows; the factories create them
directly in the test database. ``create_comment`` mutes ``post_save`` by
default so building fixtures does not trigger reply notifications.
"""

from django.db.models.signals import post_save
from django.utils.text import slugify

import factory
from factory.django import DjangoModelFactory, mute_signals
from faker import Faker

from core.constants import SETTINGS_OPTION_NAME
from core.enums import CommentApproval

fake = Faker()


class PostFactory(DjangoModelFactory):
    """Factory for Post model."""

    class Meta:
        model = "core.Post"

    title = factory.LazyAttribute(lambda _: fake.sentence(nb_words=4).rstrip("."))
    slug = factory.LazyAttribute(lambda post: slugify(post.title))


class CommentFactory(DjangoModelFactory):
    """Factory for an approved top-level Comment."""

    class Meta:
        model = "core.Comment"

    post = factory.SubFactory(PostFactory)
    parent = None
    author_name = factory.LazyAttribute(lambda _: fake.name())
    author_email = factory.LazyAttribute(lambda _: fake.email())
    content = factory.LazyAttribute(lambda _: fake.text(max_nb_chars=200))
    approved = CommentApproval.APPROVED.value


class OptionFactory(DjangoModelFactory):
    """Factory for Option model."""

    class Meta:
        model = "core.Option"
        django_get_or_create = ("name",)

    name = factory.Sequence(lambda n: f"option_{n}")
    value = ""


def create_post(**overrides):
    """Create a post."""
    return PostFactory(**overrides)


def create_comment(post, silent: bool = True, **overrides):
    """Create a comment on a post.

    With ``silent`` no save signals are sent, so no reply notification is
    attempted.
    """
    if not silent:
        return CommentFactory(post=post, **overrides)

    with mute_signals(post_save):
        return CommentFactory(post=post, **overrides)


def save_reply_settings(**values):
    """Store the reply notification templates option."""
    option = OptionFactory(name=SETTINGS_OPTION_NAME)
    option.value = values
    option.save()
    return option
