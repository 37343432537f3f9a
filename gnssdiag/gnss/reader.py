"""NMEAReader: gpsd client relaying raw NMEA sentences.

Connects to a local gpsd instance over TCP (localhost:2947) instead of
opening the receiver's serial port directly, so gpsd keeps ownership of the
device and can still feed other clients.

Reading strategy:
    The ``?WATCH`` command is sent with ``"nmea":true``, which makes gpsd
    pass the receiver's sentences through verbatim, one per line. gpsd still
    writes a few JSON lines of its own (VERSION, DEVICES, WATCH); anything
    that does not start with ``$`` is skipped. gpsd does the line framing,
    so each yielded string is exactly one sentence.
"""

import contextlib
import socket
from collections.abc import Iterator
from types import TracebackType

__all__ = ["NMEAReader"]

# --- gpsd connection defaults -------------------------------------------------

_HOST = "localhost"
_PORT = 2947
_TIMEOUT = 2.0  # socket read timeout; determines maximum cancel() latency
_RECV_SIZE = 4096

_WATCH_CMD = b'?WATCH={"enable":true,"nmea":true}\n'

_SENTENCE_START = "$"


class NMEAReader:
    """Context manager for reading NMEA sentences from gpsd.

    Two consumption patterns are supported:

    Continuous iteration (recommended for server backends)::

        with NMEAReader() as nmea:
            for sentence in nmea:
                process(sentence)

    Single read::

        with NMEAReader() as nmea:
            sentence = nmea.read()

    Sentences are returned without their trailing line ending. The reader
    does not validate checksums or sentence types.

    Args:
        host: gpsd host (default: ``"localhost"``).
        port: gpsd TCP port (default: ``2947``).
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
    ) -> None:
        """Store connection parameters; the socket is opened in ``__enter__``."""
        self._host = host
        self._port = port
        self._sock: socket.socket | None = None
        self._buffer = bytearray()
        self._cancelled: bool = False

    def __enter__(self) -> "NMEAReader":
        """Open the gpsd connection and request NMEA pass-through."""
        self._sock = socket.create_connection((self._host, self._port))
        try:
            self._sock.settimeout(_TIMEOUT)
            self._sock.sendall(_WATCH_CMD)
        except OSError:
            self._sock.close()
            self._sock = None
            raise
        self._buffer.clear()
        self._cancelled = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the gpsd connection."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        self._buffer.clear()

    def cancel(self) -> None:
        """Cancel pending blocking reads gracefully.

        Sets the cancellation flag and shuts down the socket so that any
        in-progress ``recv()`` unblocks immediately and the read raises
        ``EOFError``, allowing background threads to exit without waiting
        for the next timeout cycle.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _recv_raw(self, sock: socket.socket) -> bytes | None:
        """Receive one chunk from gpsd; returns ``None`` on timeout retry.

        Reads go straight to the socket rather than through ``makefile()``:
        a file object refuses every read after its first timeout, while the
        socket itself stays usable.

        Raises:
            EOFError: If the stream ended or the connection was closed.
        """
        try:
            chunk = sock.recv(_RECV_SIZE)
        except TimeoutError:
            return None
        except OSError as e:
            raise EOFError("gpsd connection closed.") from e
        if not chunk:
            raise EOFError("gpsd stream ended.")
        return chunk

    def _read_line(self) -> str | None:
        """Return one decoded line; returns ``None`` on timeout retry.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If cancelled, or the stream ended or was closed.
        """
        if self._sock is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        if self._cancelled:
            raise EOFError("gpsd read cancelled.")
        end = self._buffer.find(b"\n")
        while end < 0:
            chunk = self._recv_raw(self._sock)
            if chunk is None:
                return None
            self._buffer.extend(chunk)
            end = self._buffer.find(b"\n")
        raw = bytes(self._buffer[: end + 1])
        del self._buffer[: end + 1]
        # NMEA is ASCII; undecodable bytes are line noise
        return raw.decode("ascii", errors="ignore").strip()

    def read(self) -> str:
        """Block until the next NMEA sentence and return it.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._sock is None:
            raise RuntimeError("NMEAReader must be used as a context manager.")
        while True:
            line = self._read_line()
            if line and line.startswith(_SENTENCE_START):
                return line

    def __iter__(self) -> Iterator[str]:
        """Yield NMEA sentences indefinitely.

        Iteration continues until the caller breaks the loop or an exception
        propagates out (e.g. ``EOFError`` on cancellation). ``StopIteration``
        is never raised.
        """
        while True:
            yield self.read()
