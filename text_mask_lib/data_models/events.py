"""
Events delivered by the host input to the caret controller.

The host translates its toolkit events into :class:`CaretEvent` instances.
Only the event type, the key (for ``keydown``) and the input the event
belongs to are needed.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class EventType(str, Enum):
    FOCUS = "focus"
    CLICK = "click"
    KEYDOWN = "keydown"
    CHANGE = "change"


class ArrowKey(str, Enum):
    LEFT = "ArrowLeft"
    RIGHT = "ArrowRight"


class CaretEvent(BaseModel):
    """
    A single UI event.

    Attributes
    ----------
    type : EventType
        Kind of event.
    target : HostInput | None
        The input the event belongs to.  Events without a target are ignored.
    key : str | None
        Key name for ``keydown`` events (``"ArrowLeft"``, ``"ArrowRight"``...).
    default_prevented : bool
        Set by :meth:`prevent_default` when the host must keep the caret
        where the user put it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: EventType
    target: Optional[Any] = None
    key: Optional[str] = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def detach(self) -> None:
        """Drop the target, e.g. when the host input is torn down."""
        self.target = None
