"""
Resume comparison value objects.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from skillz.domain.exceptions.comparison_error import DragPayloadError


class ComparisonSide(str, Enum):
    """Side of the two-resume comparison view."""

    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "ComparisonSide":
        return ComparisonSide.RIGHT if self == ComparisonSide.LEFT else ComparisonSide.LEFT


class ItemType(str, Enum):
    """Kind of item that can be selected, dragged or deleted."""

    SKILL = "skill"
    JOB = "job"


@dataclass(frozen=True)
class DragPayload:
    """The item carried by an in-flight drag operation.

    Built at drag start and handed to the drop handler. ``to_json`` and
    ``to_text`` produce the serialised fallback channels used when the
    in-memory payload is lost between drag start and drop.
    """

    item_id: int
    item_type: ItemType
    origin_side: ComparisonSide

    def to_json(self) -> str:
        return json.dumps(
            {
                "item": self.item_id,
                "type": self.item_type.value,
                "side": self.origin_side.value,
            }
        )

    def to_text(self) -> str:
        return f"{self.item_type.value}:{self.item_id}:{self.origin_side.value}"

    @classmethod
    def from_json(cls, raw: str) -> "DragPayload":
        try:
            data = json.loads(raw)
            return cls(
                item_id=int(data["item"]),
                item_type=ItemType(data["type"]),
                origin_side=ComparisonSide(data["side"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise DragPayloadError(f"invalid JSON payload: {e}") from e

    @classmethod
    def from_text(cls, raw: str) -> "DragPayload":
        parts = raw.split(":")
        if len(parts) != 3:
            raise DragPayloadError(f"invalid text payload: {raw!r}")
        item_type, item_id, side = parts
        try:
            return cls(
                item_id=int(item_id),
                item_type=ItemType(item_type),
                origin_side=ComparisonSide(side),
            )
        except ValueError as e:
            raise DragPayloadError(f"invalid text payload: {raw!r}") from e

    @classmethod
    def resolve(
        cls,
        payload: Optional["DragPayload"] = None,
        json_data: Optional[str] = None,
        text_data: Optional[str] = None,
    ) -> "DragPayload":
        """Pick the first available channel: in-memory, JSON, then text."""
        if payload is not None:
            return payload
        if json_data:
            return cls.from_json(json_data)
        if text_data:
            return cls.from_text(text_data)
        raise DragPayloadError("no dragged item in state or transfer data")
