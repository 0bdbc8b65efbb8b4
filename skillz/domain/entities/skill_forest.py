"""Skill tree topology."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set

from skillz.domain.entities.skill import SkillTreeNode
from skillz.domain.exceptions.validation_error import ValidationError


class SkillForestError(ValidationError):
    """Raised when tree topology is inconsistent."""

    pass


class SkillForest:
    """Adjacency view (skill id -> parent skill id) over tree nodes.

    The tree is not user editable, so acyclicity is only checked when the
    catalog is seeded.
    """

    def __init__(self, nodes: Iterable[SkillTreeNode]):
        self.nodes: List[SkillTreeNode] = list(nodes)
        self._parent: Dict[int, Optional[int]] = {}
        self._children: Dict[int, List[int]] = defaultdict(list)

        for node in self.nodes:
            if node.skill_id in self._parent:
                raise SkillForestError(
                    f"Skill {node.skill_id} has more than one tree node"
                )
            self._parent[node.skill_id] = node.parent_skill_id

        for node in self.nodes:
            if node.parent_skill_id is not None:
                self._children[node.parent_skill_id].append(node.skill_id)

    def parent_of(self, skill_id: int) -> Optional[int]:
        return self._parent.get(skill_id)

    def children_of(self, skill_id: int) -> List[int]:
        return list(self._children.get(skill_id, []))

    def roots(self) -> List[int]:
        return [node.skill_id for node in self.nodes if node.is_root]

    def validate(self, known_skill_ids: Optional[Set[int]] = None) -> None:
        """Check parent references and acyclicity.

        Raises:
            SkillForestError: on an unknown skill, a dangling parent or a cycle
        """
        if known_skill_ids is not None:
            for skill_id, parent_id in self._parent.items():
                if skill_id not in known_skill_ids:
                    raise SkillForestError(f"Tree node references unknown skill {skill_id}")
                if parent_id is not None and parent_id not in known_skill_ids:
                    raise SkillForestError(
                        f"Skill {skill_id} references unknown parent {parent_id}"
                    )

        verified: Set[int] = set()
        for start in self._parent:
            visited: Set[int] = set()
            current: Optional[int] = start
            while current is not None and current not in verified:
                if current in visited:
                    raise SkillForestError(f"Cycle detected at skill {current}")
                visited.add(current)
                current = self._parent.get(current)
            verified.update(visited)
