"""Access bits, file kinds and the owner/group/others permission triple."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Access(enum.IntFlag):
    """Bits tested against a permission digit."""

    EXEC = 1
    WRITE = 2
    READ = 4


class FileType(enum.Enum):
    """Kind of data a file holds."""

    NUMERIC = 0
    TEXT = 1
    BINARY = 2
    PROGRAM = 3


def _digit(value: int, place: int) -> int:
    """Decimal digit at ``place``, keeping the sign the way truncating division does."""
    digit = abs(value) // place % 10
    return -digit if value < 0 else digit


@dataclass
class Permission:
    """Permission digits for the owner, the group and everyone else."""

    owner: int = 7
    group: int = 5
    others: int = 5

    @classmethod
    def from_mode(cls, value: int) -> Permission:
        """Build a permission from a decimal mode such as 755."""
        return cls(
            owner=_digit(value, 100),
            group=_digit(value, 10),
            others=_digit(value, 1),
        )

    def for_user(self, is_owner: bool) -> int:
        """Digit that applies to a user: the owner's, or everyone else's."""
        return self.owner if is_owner else self.others

    def allows(self, is_owner: bool, access: Access) -> bool:
        """Whether the applicable digit grants ``access``."""
        return bool(self.for_user(is_owner) & int(access))