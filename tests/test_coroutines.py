import logging

import pytest

from clove.errors import CloveError, CloveNotAListError, CloveTypeError
from clove.extensions.channels import import_channels
from clove.extensions.coroutines import Coroutine, import_coroutines, start_coroutine
from clove.listutils import list_to_sequence
from clove.reader.parser import read_all
from clove.session import Session
from clove.types.builtin import Builtin
from clove.types.nil import Null
from clove.types.values import Array, Pair


def channel_evaluator(expr, session):
    """Evaluates (send! ch value) forms where ch is bound in the session."""
    op, ch, value = list_to_sequence(expr)
    return session.call(op.name, [session.env.lookup(ch), value])


def failing_evaluator(expr, session):
    raise RuntimeError("evaluation failed")


def _expand_go(session, body_source):
    return session.expand_macro("go", read_all(body_source, session.env))


@pytest.fixture
def go_session():
    session = Session(channel_evaluator)
    import_channels(session)
    import_coroutines(session)
    return session


def test_go_expands_to_apply_form(go_session):
    form = _expand_go(go_session, "(send! out 1)")
    apply_sym, start, args = list_to_sequence(form)
    assert apply_sym is go_session.intern("apply")
    assert isinstance(start, Builtin)
    assert isinstance(args, Array)
    assert isinstance(args[0], Coroutine)
    # The body is loaded into a duplicate, not the calling session
    assert go_session.program == []
    assert len(args[0].session.program) == 1


def test_coroutine_runs_on_its_own_thread(go_session):
    out = go_session.call("make-chan", [])
    go_session.env.define("out", out)
    form = _expand_go(go_session, "(send! out 1) (send! out 2)")
    _, start, args = list_to_sequence(form)
    coro = args[0]
    assert start(go_session, list(args)) is Null
    assert go_session.call("<!", [out]) == 1
    assert go_session.call("<!", [out]) == 2
    assert coro.join(timeout=5)
    assert coro.error is None


def test_coroutine_shares_symbol_table(go_session):
    form = _expand_go(go_session, "(send! out 1)")
    coro = list_to_sequence(form)[2][0]
    assert coro.session.intern("out") is go_session.intern("out")


def test_go_propagates_load_failure(go_session):
    with pytest.raises(CloveNotAListError):
        go_session.expand_macro("go", [Pair(go_session.intern("f"), 1)])


def test_start_rejects_non_coroutine(go_session):
    with pytest.raises(CloveTypeError, match="not a coroutine"):
        start_coroutine(go_session, "__start", [1])


def test_coroutine_failure_is_logged(caplog):
    session = Session(failing_evaluator)
    session.load_string("(boom)")
    coro = Coroutine(session)
    with caplog.at_level(logging.ERROR, logger="clove.extensions.coroutines"):
        coro.start()
        assert coro.join(timeout=5)
    assert isinstance(coro.error, RuntimeError)
    assert "failed" in caplog.text


def test_coroutine_starts_once():
    coro = Coroutine(Session(lambda expr, session: expr))
    coro.start()
    coro.join(timeout=5)
    with pytest.raises(CloveError, match="already started"):
        coro.start()


def test_unstarted_coroutine_join():
    assert not Coroutine(Session()).join(timeout=0)
