"""Channel primitives: FIFO queues shared between sessions.

    (make-chan)      -> unbounded channel
    (make-chan n)    -> channel holding at most n values
    (send! ch v)     -> blocks while a bounded channel is full
    (<! ch)          -> blocks until a value is available
"""

from __future__ import annotations

import queue

from clove import LispValue
from clove.errors import CloveArityError, CloveTypeError
from clove.types.nil import Null


class Channel:
    __slots__ = ("queue",)

    def __init__(self, size: int = 0):
        # maxsize 0 means unbounded
        self.queue: queue.Queue = queue.Queue(maxsize=size)

    def send(self, value: LispValue) -> None:
        self.queue.put(value)

    def receive(self) -> LispValue:
        return self.queue.get()

    def __str__(self) -> str:
        return "[chan]"

    def __repr__(self) -> str:
        return f"<Channel maxsize={self.queue.maxsize}>"


def make_chan(session, name: str, args: list) -> Channel:
    if len(args) > 1:
        raise CloveArityError(f"{name} takes at most 1 argument")
    size = 0
    if args:
        arg = args[0]
        if type(arg) is not int or arg < 0:
            raise CloveTypeError(f"argument to {name} must be a non-negative int")
        size = arg
    return Channel(size)


def _channel_arg(name: str, args: list) -> Channel:
    if not args:
        raise CloveArityError(f"{name} requires a channel argument")
    if not isinstance(args[0], Channel):
        raise CloveTypeError(f"argument 0 of {name} must be channel")
    return args[0]


def chan_send(session, name: str, args: list) -> LispValue:
    channel = _channel_arg(name, args)
    if len(args) != 2:
        raise CloveArityError(f"{name} takes a channel and a value")
    channel.send(args[1])
    return Null


def chan_receive(session, name: str, args: list) -> LispValue:
    channel = _channel_arg(name, args)
    if len(args) != 1:
        raise CloveArityError(f"{name} takes exactly 1 argument")
    return channel.receive()


def import_channels(session) -> None:
    session.add_function("make-chan", make_chan)
    session.add_function("send!", chan_send)
    session.add_function("<!", chan_receive)
