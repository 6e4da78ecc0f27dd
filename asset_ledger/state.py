"""
Atomic State Module

All-or-nothing execution for ledger operations. Components route every write
through an undo log; a TransactionScope binds one log to all components of a
facade for the duration of an operation and replays it backwards if the
operation raises. Operations are serialized behind a single re-entrant lock.
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional


_MISSING = object()


@dataclass(frozen=True)
class UndoEntry:
    """Prior value of one mapping slot or attribute"""
    target: Any
    key: Any
    old_value: Any
    is_attribute: bool = False

    def undo(self) -> None:
        if self.is_attribute:
            setattr(self.target, self.key, self.old_value)
        elif self.old_value is _MISSING:
            self.target.pop(self.key, None)
        else:
            self.target[self.key] = self.old_value


class UndoLog:
    """Ordered record of prior values written during one operation"""

    def __init__(self):
        self._entries: List[UndoEntry] = []

    def record_item(self, mapping: Dict, key: Any) -> None:
        self._entries.append(UndoEntry(mapping, key, mapping.get(key, _MISSING)))

    def record_attribute(self, obj: Any, name: str) -> None:
        self._entries.append(UndoEntry(obj, name, getattr(obj, name), is_attribute=True))

    def rollback(self) -> None:
        """Restore every recorded value, newest first"""
        while self._entries:
            self._entries.pop().undo()

    def __len__(self) -> int:
        return len(self._entries)


class StateComponent:
    """
    Base class for components owning ledger state.

    Subclasses mutate state only through _write, _delete and _write_attr so
    that an enclosing TransactionScope can undo them.
    """

    _undo_log: Optional[UndoLog] = None

    def bind_undo_log(self, undo_log: Optional[UndoLog]) -> None:
        self._undo_log = undo_log

    def _write(self, mapping: Dict, key: Any, value: Any) -> None:
        if self._undo_log is not None:
            self._undo_log.record_item(mapping, key)
        mapping[key] = value

    def _delete(self, mapping: Dict, key: Any) -> None:
        if key not in mapping:
            return
        if self._undo_log is not None:
            self._undo_log.record_item(mapping, key)
        del mapping[key]

    def _write_attr(self, name: str, value: Any) -> None:
        if self._undo_log is not None:
            self._undo_log.record_attribute(self, name)
        setattr(self, name, value)


class TransactionScope:
    """
    Serializes operations over a set of components and makes each atomic.

    Nested atomic() blocks join the outermost one; only the outermost block
    commits or rolls back.
    """

    def __init__(self, components: Iterable[StateComponent]):
        self._components = list(components)
        self._lock = threading.RLock()
        self._undo_log: Optional[UndoLog] = None
        self._depth = 0

    def begin_transaction(self) -> None:
        if self._depth == 0:
            self._undo_log = UndoLog()
            for component in self._components:
                component.bind_undo_log(self._undo_log)
        self._depth += 1

    def commit(self) -> None:
        self._depth -= 1
        if self._depth == 0:
            self._release()

    def rollback(self) -> None:
        self._depth -= 1
        if self._depth == 0:
            try:
                self._undo_log.rollback()
            finally:
                self._release()

    def _release(self) -> None:
        for component in self._components:
            component.bind_undo_log(None)
        self._undo_log = None

    @contextmanager
    def atomic(self):
        """Context manager for atomic operations"""
        with self._lock:
            self.begin_transaction()
            try:
                yield
                self.commit()
            except BaseException:
                self.rollback()
                raise

    @contextmanager
    def locked(self):
        """Hold the operation lock for a consistent read"""
        with self._lock:
            yield

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0
