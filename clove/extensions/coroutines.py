"""Coroutine spawning.

`(go body...)` duplicates the calling session, loads the body into the copy
and expands to `(apply <__start> [coroutine])`; applying `__start` runs the
copy on its own daemon thread.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from clove import LispValue, SExpression
from clove.errors import CloveError, CloveTypeError
from clove.listutils import make_list
from clove.session import Session
from clove.types.builtin import Builtin
from clove.types.nil import Null
from clove.types.values import Array

logger = logging.getLogger(__name__)


class Coroutine:
    __slots__ = ("session", "thread", "result", "error")

    def __init__(self, session: Session):
        self.session = session
        self.thread: Optional[threading.Thread] = None
        self.result: LispValue = Null
        self.error: Optional[BaseException] = None

    def _run(self) -> None:
        logger.debug("coroutine %s started", self.thread.name)
        try:
            self.result = self.session.run()
        except Exception as ex:
            self.error = ex
            logger.exception("coroutine %s failed", self.thread.name)
        else:
            logger.debug("coroutine %s finished", self.thread.name)

    def start(self) -> threading.Thread:
        if self.thread is not None:
            raise CloveError("coroutine already started")
        self.thread = threading.Thread(target=self._run, daemon=True)
        self.thread.start()
        return self.thread

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the coroutine; True once it has finished."""
        if self.thread is None:
            return False
        self.thread.join(timeout)
        return not self.thread.is_alive()

    def __str__(self) -> str:
        return "[coroutine]"


def start_coroutine(session: Session, name: str, args: list) -> LispValue:
    if len(args) != 1 or not isinstance(args[0], Coroutine):
        raise CloveTypeError("not a coroutine")
    args[0].start()
    return Null


START = Builtin("__start", start_coroutine)


def go_macro(session: Session, name: str, args: list[SExpression]) -> SExpression:
    coro_session = session.duplicate()
    # Load failures propagate to the caller instead of yielding an empty form
    coro_session.load_expressions(args)
    coro = Coroutine(coro_session)
    return make_list([session.intern("apply"), START, Array([coro])])


def import_coroutines(session: Session) -> None:
    session.add_macro("go", go_macro)
