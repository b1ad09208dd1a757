from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence

from .events import ScriptEvent
from .hooks import InstallAssetsHook, InstallThemesAndFilesHook

logger = logging.getLogger(__name__)


class Hook(Protocol):
    """A handler bound to one lifecycle event."""

    hook_id: str
    event_name: str

    def run(self, event: ScriptEvent) -> None:
        ...


class UnknownEventError(ValueError):
    pass


@dataclass(frozen=True)
class DispatchResult:
    event_name: str
    ran_hooks: List[str]


def default_hooks() -> List[Hook]:
    return [
        InstallAssetsHook(),
        InstallThemesAndFilesHook(),
    ]


def dispatch(event: ScriptEvent, hooks: Optional[Sequence[Hook]] = None) -> DispatchResult:
    """Run every hook registered for `event.name`, in order."""

    hooks = default_hooks() if hooks is None else hooks
    matching = [h for h in hooks if h.event_name == event.name]
    if not matching:
        known = sorted({h.event_name for h in hooks})
        raise UnknownEventError(f"No hooks for event {event.name!r} (known: {', '.join(known)})")

    ran: List[str] = []
    for hook in matching:
        logger.info("Running hook %s for %s", hook.hook_id, event.name)
        hook.run(event)
        ran.append(hook.hook_id)

    return DispatchResult(event_name=event.name, ran_hooks=ran)
