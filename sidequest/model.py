"""Domain objects shared by client and server: quests and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(eq=False)
class Quest:
    """A quest, possibly nested below a parent quest."""

    id: int = 0
    caption: str = ""
    parent: Optional[Quest] = field(default=None, repr=False)
    subquests: List[Quest] = field(default_factory=list, repr=False)


@dataclass
class User:
    """A user account and the main quests that belong to it."""

    email: str = ""
    display_name: str = ""
    password: str = field(default="", repr=False)
    main_quests: List[Quest] = field(default_factory=list, repr=False)