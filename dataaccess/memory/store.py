"""
In-memory backing store with explicit change tracking.

Committed entities live in one list per model. Staged changes are kept in a change
list keyed by entity identity; registering the same entity again overwrites its
previous action, except that an uncommitted insert is not downgraded by a later
dirty or clean notification.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type

from dataaccess.logging import get_logger

logger = get_logger(__name__)


class ChangeAction(str, Enum):
    """Intended action for a tracked entity."""
    NEW = "NEW"
    DIRTY = "DIRTY"
    CLEAN = "CLEAN"
    DELETED = "DELETED"


def _snapshot(entity: Any) -> Optional[dict]:
    state = getattr(entity, "__dict__", None)
    return dict(state) if state is not None else None


class InMemoryStore:
    """Collections of committed entities plus the pending change list."""

    def __init__(self, collections: Optional[Dict[Type, Iterable[Any]]] = None):
        self._collections: Dict[Type, List[Any]] = {}
        self._changes: Dict[int, Tuple[Optional[Type], Any, ChangeAction]] = {}
        self._snapshots: Dict[int, Optional[dict]] = {}
        for model, items in (collections or {}).items():
            self._collections[model] = list(items)
        self._take_snapshots()

    def items(self, model: Type) -> Tuple[Any, ...]:
        """Committed entities of model, in insertion order."""
        return tuple(self._collections.get(model, ()))

    def stage(self, entity: Any, action: ChangeAction, model: Optional[Type] = None) -> None:
        action = ChangeAction(action)
        previous = self._changes.get(id(entity))
        downgrade = action in (ChangeAction.DIRTY, ChangeAction.CLEAN)
        if previous is not None and previous[2] is ChangeAction.NEW and downgrade:
            # An uncommitted insert stays an insert; only a delete cancels it
            if not self._is_committed(entity, previous[0] or model):
                return
        self._changes[id(entity)] = (model or (previous[0] if previous else None), entity, action)

    def pending(self) -> List[Tuple[Any, ChangeAction]]:
        return [(entity, action) for _, entity, action in self._changes.values()]

    def action_for(self, entity: Any) -> Optional[ChangeAction]:
        change = self._changes.get(id(entity))
        return change[2] if change else None

    def commit(self) -> int:
        """Apply every staged change at once; returns the number of applied changes."""
        collections = {model: list(items) for model, items in self._collections.items()}
        applied = 0
        for model, entity, action in self._changes.values():
            target = collections.setdefault(model or self._model_for(entity), [])
            present = any(item is entity for item in target)
            if action is ChangeAction.NEW and not present:
                target.append(entity)
                applied += 1
            elif action is ChangeAction.DELETED and present:
                target[:] = [item for item in target if item is not entity]
                applied += 1
            elif action is ChangeAction.DIRTY and present:
                applied += 1
        # Nothing above touches the live collections, so a failure leaves them intact
        self._collections = collections
        self._changes.clear()
        self._take_snapshots()
        logger.debug(f"Store commit | {applied} change(s) applied")
        return applied

    def rollback(self) -> None:
        """Drop staged changes and restore committed entities to their last committed state."""
        self._changes.clear()
        for items in self._collections.values():
            for entity in items:
                snapshot = self._snapshots.get(id(entity))
                if snapshot is not None:
                    entity.__dict__.clear()
                    entity.__dict__.update(snapshot)

    def clear(self) -> None:
        self._collections.clear()
        self._changes.clear()
        self._snapshots.clear()

    def _is_committed(self, entity: Any, model: Optional[Type]) -> bool:
        items = self._collections.get(model or self._model_for(entity), ())
        return any(item is entity for item in items)

    def _model_for(self, entity: Any) -> Type:
        for model in self._collections:
            if isinstance(entity, model):
                return model
        return type(entity)

    def _take_snapshots(self) -> None:
        self._snapshots = {
            id(entity): _snapshot(entity)
            for items in self._collections.values()
            for entity in items
        }
