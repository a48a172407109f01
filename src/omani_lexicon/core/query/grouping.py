from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from omani_lexicon.core.schemas import Record

MISSING_ROOT_KEY = "missing-root"


@dataclass(frozen=True)
class RootGroup:
    """Records sharing a trimmed root.

    ``missing`` marks the synthetic group of rootless records; its key is
    always MISSING_ROOT_KEY, but a real root may use the same spelling.
    """

    key: str
    members: Tuple[Record, ...]
    missing: bool = False

    def __len__(self) -> int:
        return len(self.members)


def group_by_root(result_set: Sequence[Record]) -> Tuple[RootGroup, ...]:
    """Group records by trimmed root.

    Groups are ordered by key (case-sensitive code-point order) and keep
    first-seen member order. Rootless records go into one trailing group,
    present only when non-empty.

    Examples:
        >>> groups = group_by_root([Record(root="ktb"), Record(root=" "), Record(root="Ktb")])
        >>> [(g.key, len(g)) for g in groups]
        [('Ktb', 1), ('ktb', 1), ('missing-root', 1)]
    """
    by_root: Dict[str, List[Record]] = {}
    rootless: List[Record] = []
    for record in result_set:
        key = record.root_key
        if key is None:
            rootless.append(record)
        else:
            by_root.setdefault(key, []).append(record)

    groups = [RootGroup(key=k, members=tuple(by_root[k])) for k in sorted(by_root)]
    if rootless:
        groups.append(RootGroup(key=MISSING_ROOT_KEY, members=tuple(rootless), missing=True))
    return tuple(groups)


__all__ = ["MISSING_ROOT_KEY", "RootGroup", "group_by_root"]
