"""UniversalDetector: streaming encoding detection."""

from __future__ import annotations

from charsight._utils import DEFAULT_MAX_BYTES, _as_bytes, _validate_max_bytes
from charsight.enums import EncodingEra, NoDetectionReason
from charsight.pipeline import BOM_CONFIDENCE, Candidate, NoDetection
from charsight.pipeline.bom import detect_bom
from charsight.pipeline.orchestrator import run_pipeline

_UTF32_ENCODINGS = frozenset({"utf-32-le", "utf-32-be"})


class UniversalDetector:
    """Streaming character encoding detector.

    Implements a feed/close pattern for incremental detection of character
    encoding from byte streams.  Data is buffered up to *max_bytes*; a UTF-8
    or UTF-16 byte-order mark at the start of the stream finishes detection
    early.  A UTF-32 mark does not, since whether it counts depends on the
    length of the whole payload.
    :meth:`close` returns the same value :func:`charsight.detect_best` would
    for the buffered bytes.
    """

    def __init__(
        self,
        encoding_era: EncodingEra = EncodingEra.MODERN_WEB,
        max_bytes: int = DEFAULT_MAX_BYTES,
    ) -> None:
        """Initialize the detector.

        :param encoding_era: Restrict candidate encodings to the given era.
        :param max_bytes: Maximum number of bytes to buffer from
            :meth:`feed` calls before stopping accumulation.
        :raises ValueError: If *max_bytes* is not a positive integer.
        """
        _validate_max_bytes(max_bytes)
        self._encoding_era = encoding_era
        self._max_bytes = max_bytes
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result: Candidate | NoDetection | None = None
        self._bom_checked = False

    def feed(self, byte_str: bytes | bytearray) -> None:
        """Feed a chunk of bytes to the detector.

        :param byte_str: The next chunk of bytes to examine.
        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        chunk = _as_bytes(byte_str)
        if self._done:
            return
        remaining = self._max_bytes - len(self._buffer)
        if remaining > 0:
            self._buffer.extend(chunk[:remaining])
        if len(self._buffer) >= self._max_bytes:
            self._done = True
        self._check_bom()

    def _check_bom(self) -> None:
        """An unambiguous BOM in the first four bytes decides the encoding."""
        if self._bom_checked or len(self._buffer) < 4:
            return
        self._bom_checked = True
        encoding = detect_bom(bytes(self._buffer[:4]))
        # FF FE 00 00 may still turn out to be UTF-16-LE text opening with NUL
        if encoding is not None and encoding not in _UTF32_ENCODINGS:
            self._result = Candidate(encoding, BOM_CONFIDENCE)
            self._done = True

    def close(self) -> Candidate | NoDetection:
        """Finalize detection and return the best result.

        :returns: The top :class:`Candidate`, or a :class:`NoDetection`.
        """
        if not self._closed:
            self._closed = True
            self._done = True
            data = bytes(self._buffer)
            if not data:
                self._result = NoDetection(NoDetectionReason.EMPTY_INPUT)
            else:
                results = run_pipeline(
                    data, self._encoding_era, max_bytes=self._max_bytes
                )
                self._result = (
                    results[0] if results else NoDetection(NoDetectionReason.NO_MATCH)
                )
        return self.result

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._done = False
        self._closed = False
        self._result = None
        self._bom_checked = False

    @property
    def done(self) -> bool:
        """Whether detection is complete and no more data is needed."""
        return self._done

    @property
    def result(self) -> Candidate | NoDetection:
        """The current best detection result.

        Before :meth:`close` this is the early BOM result if there was one,
        otherwise a :class:`NoDetection`.
        """
        if self._result is not None:
            return self._result
        if not self._buffer:
            return NoDetection(NoDetectionReason.EMPTY_INPUT)
        return NoDetection(NoDetectionReason.NO_MATCH)
