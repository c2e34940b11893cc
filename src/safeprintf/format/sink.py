# topmark:header:start
#
#   project      : SafePrintf
#   file         : sink.py
#   file_relpath : src/safeprintf/format/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text sinks for the format interpreter.

The interpreter only needs to append text. [`Sink`][safeprintf.format.sink.Sink] captures
that capability, so any file-like object (``sys.stdout``, ``io.StringIO``, a socket
wrapper...) can be used directly.

A [`ConfigurableSink`][safeprintf.format.sink.ConfigurableSink] additionally carries a
persistent [`SinkConfiguration`][safeprintf.format.state.SinkConfiguration].
[`configured`][safeprintf.format.sink.configured] applies a configuration for the
duration of a ``with`` block and restores the previous one on every exit path, so one
argument's formatting never leaks into the next literal run or argument.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from safeprintf.format.state import DEFAULT_CONFIGURATION, SinkConfiguration

if TYPE_CHECKING:
    from collections.abc import Iterator


class Sink(Protocol):
    """Anything text can be appended to."""

    def write(self, text: str, /) -> object:
        """Append ``text``."""
        ...


@runtime_checkable
class ConfigurableSink(Protocol):
    """A sink that also carries persistent formatting state."""

    config: SinkConfiguration

    def write(self, text: str, /) -> object:
        """Append ``text``."""
        ...


class TextSink:
    """Configurable sink writing to a text stream or to an in-memory buffer.

    Args:
        stream (Sink | None): Destination; an internal ``io.StringIO`` buffer when None.
        config (SinkConfiguration): Initial persistent configuration.

    Attributes:
        stream (Sink): Destination of the written text.
        config (SinkConfiguration): Current formatting state.
    """

    def __init__(
        self,
        stream: Sink | None = None,
        *,
        config: SinkConfiguration = DEFAULT_CONFIGURATION,
    ) -> None:
        self.stream: Sink = stream if stream is not None else io.StringIO()
        self.config: SinkConfiguration = config

    def __repr__(self) -> str:
        return f"TextSink(stream={self.stream!r}, config={self.config!r})"

    def write(self, text: str, /) -> int:
        """Append ``text`` to the underlying stream.

        Args:
            text (str): Text to append.

        Returns:
            int: Number of characters written.
        """
        self.stream.write(text)
        return len(text)

    def getvalue(self) -> str:
        """Return everything written so far (in-memory sinks only).

        Returns:
            str: The accumulated text.

        Raises:
            TypeError: If the sink writes to an external stream.
        """
        if not isinstance(self.stream, io.StringIO):
            raise TypeError("getvalue() is only available on in-memory sinks")
        return self.stream.getvalue()


def as_configurable(sink: Sink) -> ConfigurableSink:
    """Return ``sink`` itself if it is configurable, else wrap it in a `TextSink`.

    Args:
        sink (Sink): Any object with a ``write(str)`` method.

    Returns:
        ConfigurableSink: A sink carrying a ``config`` attribute.
    """
    if isinstance(sink, ConfigurableSink):
        return sink
    return TextSink(sink)


@contextmanager
def configured(sink: ConfigurableSink, config: SinkConfiguration) -> Iterator[SinkConfiguration]:
    """Apply ``config`` to ``sink`` for the duration of the block.

    The sink's previous configuration is restored when the block exits, including
    when it exits with an exception.

    Args:
        sink (ConfigurableSink): The sink to configure.
        config (SinkConfiguration): Configuration to apply.

    Yields:
        SinkConfiguration: The applied configuration.
    """
    saved = sink.config
    sink.config = config
    try:
        yield config
    finally:
        sink.config = saved
