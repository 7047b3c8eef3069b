"""Best-effort post-commit actions.

Some workflow steps (sending a notification after a submission is saved or
reviewed) run only after the primary write has committed. Their failure must
never turn a successful primary operation into an error, so they are executed
through ``run_best_effort`` which logs and captures the exception instead of
raising it.

The primary result and the outcomes of its side effects travel together in a
``WorkflowOutcome`` so callers can tell "saved, but the notification failed"
apart from "saved and notified".
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from ..observability.metrics import side_effects_failed_total

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SideEffectOutcome:
    """Result of a single best-effort action.

    Attributes:
        name: Short action name used in logs (e.g. "notify_reviewer")
        succeeded: Whether the action completed without raising
        error: String form of the captured exception, if any
    """
    name: str
    succeeded: bool
    error: Optional[str] = None


@dataclass
class WorkflowOutcome(Generic[T]):
    """Primary operation result plus the outcomes of its post-commit actions."""
    value: T
    side_effects: List[SideEffectOutcome] = field(default_factory=list)

    @property
    def side_effects_ok(self) -> bool:
        return all(effect.succeeded for effect in self.side_effects)

    def failed_side_effects(self) -> List[SideEffectOutcome]:
        return [effect for effect in self.side_effects if not effect.succeeded]


def run_best_effort(
    name: str,
    action: Callable[[], Any],
    context: Optional[dict] = None,
) -> SideEffectOutcome:
    """Run a post-commit action, capturing and logging any failure.

    Args:
        name: Action name for logging
        action: Zero-argument callable performing the side effect
        context: Extra fields attached to the log record

    Returns:
        SideEffectOutcome describing whether the action succeeded
    """
    try:
        action()
    except Exception as e:
        logger.error(
            f"Best-effort action '{name}' failed",
            exc_info=True,
            extra={"action": name, "error": str(e), **(context or {})},
        )
        side_effects_failed_total.labels(name=name).inc()
        return SideEffectOutcome(name=name, succeeded=False, error=str(e))

    return SideEffectOutcome(name=name, succeeded=True)
