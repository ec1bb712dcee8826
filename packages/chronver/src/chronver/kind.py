# SPDX-License-Identifier: MIT
"""Release qualifier (kind) of a chronological version.

- Regular: no qualifier, formats as the empty string
- Breaking: the reserved ``break`` marker
- Feature: any other non-empty ASCII name, kept verbatim

Ordering: Regular < Breaking < Feature, features by name.
"""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass

from .errors import InvalidKindNameError, NonAsciiKindError, ParseKindError

BREAK_KEYWORD = "break"


class KindTag(enum.IntEnum):
    """Variant of a Kind, in ascending sort order."""

    REGULAR = 0
    BREAKING = 1
    FEATURE = 2


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Kind:
    """A release qualifier.

    Use the :meth:`regular`, :meth:`breaking` and :meth:`feature` constructors
    rather than building the tag by hand.

    Attributes:
        tag: Which variant this is
        name: Feature name (empty unless tag is FEATURE)
    """

    tag: KindTag
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.tag, KindTag):
            raise ParseKindError(repr(self.tag))
        if not isinstance(self.name, str):
            raise InvalidKindNameError(repr(self.name))
        if self.tag is KindTag.FEATURE:
            if not self.name:
                raise InvalidKindNameError(self.name)
            if not self.name.isascii():
                raise NonAsciiKindError(self.name)
            # reserved for breaking releases
            if self.name == BREAK_KEYWORD:
                raise InvalidKindNameError(self.name)
        elif self.name:
            raise InvalidKindNameError(self.name)

    @classmethod
    def regular(cls) -> "Kind":
        return cls(KindTag.REGULAR)

    @classmethod
    def breaking(cls) -> "Kind":
        return cls(KindTag.BREAKING)

    @classmethod
    def feature(cls, name: str) -> "Kind":
        """Create a named feature kind.

        Raises:
            InvalidKindNameError: If the name is empty or the reserved ``break`` keyword
            NonAsciiKindError: If the name contains non-ASCII characters
        """
        return cls(KindTag.FEATURE, name)

    @classmethod
    def parse(cls, text: str) -> "Kind":
        """Parse the qualifier text following the ``-`` separator.

        There is no escaping: the whole text is the feature name.

        Raises:
            NonAsciiKindError: If the text contains non-ASCII characters

        Examples:
            >>> Kind.parse("")
            Kind(tag=<KindTag.REGULAR: 0>, name='')
            >>> Kind.parse("break").is_breaking
            True
            >>> Kind.parse("my-feature").name
            'my-feature'
        """
        if not text:
            return cls.regular()
        if text == BREAK_KEYWORD:
            return cls.breaking()
        if not text.isascii():
            raise NonAsciiKindError(text)
        return cls.feature(text)

    @property
    def is_regular(self) -> bool:
        """True if there is no qualifier; such kinds are omitted when serialized."""
        return self.tag is KindTag.REGULAR

    @property
    def is_breaking(self) -> bool:
        return self.tag is KindTag.BREAKING

    @property
    def is_feature(self) -> bool:
        return self.tag is KindTag.FEATURE

    def sort_key(self) -> tuple[int, str]:
        return (int(self.tag), self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Kind):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.tag is KindTag.BREAKING:
            return BREAK_KEYWORD
        return self.name
