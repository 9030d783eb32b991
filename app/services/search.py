from dataclasses import dataclass, field
from typing import FrozenSet, Optional

TAG_PREFIX = "#"


@dataclass(frozen=True)
class SearchFilter:
    """Parsed search string: optional title text plus tags a post must all carry."""

    text: Optional[str] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return self.text is None and not self.tags


def parse_search(raw: Optional[str]) -> SearchFilter:
    """Split ``raw`` into free-text words and ``#tag`` tokens.

    Words are rejoined with single spaces; no words at all means no text
    filter (``text is None``), never an empty-string filter. A bare ``#``
    token is dropped rather than becoming an empty tag requirement.
    """
    if not raw or not raw.strip():
        return SearchFilter()
    tags = set()
    words = []
    for token in raw.split():
        if token.startswith(TAG_PREFIX):
            tag = token[len(TAG_PREFIX):]
            if tag:
                tags.add(tag)
        else:
            words.append(token)
    text = " ".join(words).strip() or None
    return SearchFilter(text=text, tags=frozenset(tags))
