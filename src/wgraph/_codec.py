"""Line-oriented text format for weighted graphs.

Each declared vertex is written on its own line, followed by its outgoing
edges in adjacency order::

    A: B(1.0) → C(5.0)
    B: C(2.0)
    C:

A graph ends at a blank line or at the end of input, so several graphs can
share one stream.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ._graph import WeightedGraph
from ._str_enum_with_doc import StrEnumWithDoc
from ._types import Weight, parse_str_vertex

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import TextIO

logger = logging.getLogger(__name__)

DEFAULT_ARROW = " → "

_PARSE_ERRORS = (ValueError, TypeError, ArithmeticError)


class StreamState(StrEnumWithDoc):
    """Where reading stopped."""

    GOOD = "good", "Stopped at a blank line; the stream may hold more data."
    EOF = "eof", "Reached the end of input without a malformed vertex line."
    FAILED = "failed", "Stopped at a vertex token that could not be parsed."


@dataclass(frozen=True, slots=True)
class ReadResult[V, W: Weight]:
    """Outcome of reading one graph from text.

    The graph holds every line read before a failure; nothing is rolled back.

    Attributes:
        graph: The graph built from the input.
        state: Where reading stopped.
        error: Description of the failure when ``state`` is FAILED.
        line_number: 1-based line of the failure when ``state`` is FAILED.

    """

    graph: WeightedGraph[V, W]
    state: StreamState
    error: str | None = None
    line_number: int | None = None

    @property
    def ok(self) -> bool:
        """Check if reading finished without a malformed vertex line."""
        return self.state is not StreamState.FAILED


def _format_edge(
    destination: Any,
    weight: Any,
    format_vertex: Callable[[Any], str],
    format_weight: Callable[[Any], str],
) -> str:
    return f"{format_vertex(destination)}({format_weight(weight)})"


def serialize[V, W](
    graph: WeightedGraph[V, W],
    *,
    arrow: str = DEFAULT_ARROW,
    format_vertex: Callable[[V], str] = str,
    format_weight: Callable[[W], str] = str,
) -> str:
    """Write a graph to text.

    Args:
        graph: The graph to write.
        arrow: Separator printed between the edges of one line.
        format_vertex: Converts a vertex to its token.
        format_weight: Converts a weight to its token.

    Returns:
        One line per declared vertex, without a trailing newline.

    """
    lines = [
        f"{format_vertex(vertex)}: "
        + arrow.join(
            _format_edge(destination, weight, format_vertex, format_weight)
            for destination, weight in graph.neighbors(vertex)
        )
        for vertex in graph
    ]
    return "\n".join(lines)


def write_graph[V, W](
    graph: WeightedGraph[V, W],
    stream: TextIO,
    *,
    arrow: str = DEFAULT_ARROW,
    format_vertex: Callable[[V], str] = str,
    format_weight: Callable[[W], str] = str,
) -> None:
    """Write a graph to a text stream in the same format as ``serialize``."""
    stream.write(serialize(graph, arrow=arrow, format_vertex=format_vertex, format_weight=format_weight))


def _iter_edges(
    text: str,
    parse_vertex: Callable[[str], Any],
    parse_weight: Callable[[str], Any],
    arrow_token: str,
) -> Iterator[tuple[Any, Any]]:
    """Parse ``dest(weight)`` tokens until the text ends or a token is malformed."""
    rest = text.lstrip()
    while rest:
        open_at = rest.find("(")
        close_at = rest.find(")", open_at + 1) if open_at >= 0 else -1
        if close_at < 0:
            logger.debug(f"Unterminated edge token: {rest!r}")
            return
        try:
            destination = parse_vertex(rest[:open_at].strip())
            weight = parse_weight(rest[open_at + 1 : close_at].strip())
        except _PARSE_ERRORS as e:
            logger.debug(f"Malformed edge token {rest[: close_at + 1]!r}: {e}")
            return
        yield destination, weight

        rest = rest[close_at + 1 :].lstrip()
        if not rest or not arrow_token:
            continue
        if not rest.startswith(arrow_token):
            logger.debug(f"Expected {arrow_token!r} between edges, got {rest!r}")
            return
        rest = rest[len(arrow_token) :].lstrip()


def read_graph(
    stream: TextIO,
    *,
    parse_vertex: Callable[[str], Any] = parse_str_vertex,
    parse_weight: Callable[[str], Any] = float,
    arrow: str = DEFAULT_ARROW,
    auto_declare_destinations: bool = False,
) -> ReadResult[Any, Any]:
    """Read one graph from a text stream.

    Lines are consumed up to and including the terminating blank line, so
    the stream is left at the start of the next graph.

    A vertex token that is empty or rejected by ``parse_vertex`` stops
    reading with state FAILED. A malformed edge token only ends the edge
    list of its own line.

    Args:
        stream: Text stream to read from.
        parse_vertex: Converts a vertex token. Raises ``ValueError`` on bad input.
        parse_weight: Converts a weight token. Raises ``ValueError`` on bad input.
        arrow: Separator expected between the edges of one line.
        auto_declare_destinations: Declare every edge destination as a vertex.

    Returns:
        The graph read so far and the state reading stopped in.

    """
    graph: WeightedGraph[Any, Any] = WeightedGraph(auto_declare_destinations=auto_declare_destinations)
    arrow_token = arrow.strip()

    for line_number, raw in enumerate(iter(stream.readline, ""), start=1):
        line = raw.rstrip("\r\n")
        if not line:
            return ReadResult(graph=graph, state=StreamState.GOOD)

        head, _, tail = line.partition(":")
        token = head.strip()
        try:
            if not token:
                msg = "missing vertex name"
                raise ValueError(msg)
            vertex = parse_vertex(token)
        except _PARSE_ERRORS as e:
            error = f"Invalid vertex {token!r} on line {line_number}: {e}"
            logger.debug(error)
            return ReadResult(graph=graph, state=StreamState.FAILED, error=error, line_number=line_number)

        graph.add_vertex(vertex)
        for destination, weight in _iter_edges(tail, parse_vertex, parse_weight, arrow_token):
            graph.add_edge(vertex, destination, weight)

    return ReadResult(graph=graph, state=StreamState.EOF)


def deserialize(
    text: str,
    *,
    parse_vertex: Callable[[str], Any] = parse_str_vertex,
    parse_weight: Callable[[str], Any] = float,
    arrow: str = DEFAULT_ARROW,
    auto_declare_destinations: bool = False,
) -> ReadResult[Any, Any]:
    """Read one graph from text.

    See ``read_graph`` for the parsing rules.

    Example:
        >>> result = deserialize("A: B(1) → C(5)\\nB: C(2)\\nC: ")
        >>> result.state
        <StreamState.EOF: 'eof'>
        >>> result.graph.neighbors("A")
        [('B', 1.0), ('C', 5.0)]

    """
    return read_graph(
        io.StringIO(text),
        parse_vertex=parse_vertex,
        parse_weight=parse_weight,
        arrow=arrow,
        auto_declare_destinations=auto_declare_destinations,
    )
