"""
DragSession: tentative state of one drag gesture.

Nothing is committed until end(); cancel() simply forgets the gesture.
"""

from dataclasses import dataclass, field
import time
from typing import Optional

from uiforge.logging_config import logger
from uiforge.schemas import ActiveDescriptor, DropIndicator, HoverDescriptor, MutationResult

from .resolver import drop_indicator, resolve


@dataclass
class DragState:
    """
    State of an in-flight drag.
    """
    active: ActiveDescriptor
    started_at: float = field(default_factory=time.time)
    hover: Optional[HoverDescriptor] = None
    indicator: Optional[DropIndicator] = None
    over_ticks: int = 0


class DragSession:
    """
    Wires the input layer's drag signals to the resolver and the engine.

    over() is cheap and may run many times per second; end() resolves once
    more against the committed forest and commits exactly one engine call.
    """

    def __init__(self, engine):
        """
        Initialize session.

        Args:
            engine: MutationFacade that receives the committed edit
        """
        self.engine = engine
        self.state: Optional[DragState] = None

    @property
    def is_dragging(self) -> bool:
        return self.state is not None

    @property
    def indicator(self) -> Optional[DropIndicator]:
        return self.state.indicator if self.state else None

    def start(self, active: ActiveDescriptor) -> None:
        """Begin a gesture. A gesture already in flight is discarded."""
        if self.state is not None:
            logger.debug(f"Drag of '{self.state.active.id}' replaced by '{active.id}'")
        self.state = DragState(active=active)

    def over(self, hover: Optional[HoverDescriptor]) -> Optional[DropIndicator]:
        """
        Update the tentative target.

        Returns:
            Indicator to highlight, or None when the drop would be rejected
        """
        if self.state is None:
            return None
        self.state.hover = hover
        self.state.over_ticks += 1
        self.state.indicator = drop_indicator(self.state.active, hover, self.engine.forest)
        return self.state.indicator

    def end(self, hover: Optional[HoverDescriptor] = None) -> MutationResult:
        """
        Finish the gesture and commit the resolved edit.

        Args:
            hover: Final hover target; defaults to the last over() target
        """
        if self.state is None:
            return MutationResult(operation="drop", changed=False, message="no active drag")

        state, self.state = self.state, None
        final_hover = hover if hover is not None else state.hover
        intent = resolve(state.active, final_hover, self.engine.forest)
        return self.engine.apply_intent(state.active, intent)

    def cancel(self) -> None:
        """Abandon the gesture without touching the engine."""
        if self.state is not None:
            logger.debug(f"Drag of '{self.state.active.id}' cancelled")
        self.state = None
