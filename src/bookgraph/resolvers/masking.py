"""Layer that hides author passwords."""

from __future__ import annotations

from dataclasses import replace

from ..auth.context import Identity
from ..store.models import Author
from .layer import Args, Delegation, Layer, ResolverSet, override

DEFAULT_REDACTION_MARKER = "****"


class MaskSensitiveFields(Layer):
    """Replace ``password`` on every author record with a fixed marker."""

    name = "mask-sensitive-fields"

    def __init__(self, marker: str = DEFAULT_REDACTION_MARKER):
        self.marker = marker

    def mask(self, author: Author) -> Author:
        return replace(author, password=self.marker)

    @override("authors", Delegation.FULL)
    def authors(self, previous: ResolverSet, args: Args, identity: Identity | None) -> list[Author]:
        return [self.mask(author) for author in previous["authors"](args, identity)]

    @override("author", Delegation.FULL)
    def author(self, previous: ResolverSet, args: Args, identity: Identity | None) -> Author | None:
        author = previous["author"](args, identity)
        if author is None:
            return None
        return self.mask(author)
