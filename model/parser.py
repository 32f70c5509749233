"""Reader for the plain-text graph description format.

The input is a token stream of ``NODE name x y`` and ``EDGE from to``
records.  Whitespace, commas and parentheses all separate tokens, so
``NODE A (0, 0)`` and ``NODE A 0 0`` are equivalent.  Text after ``#`` on a
line is ignored.  Anything that does not form a valid record is skipped
with a warning.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterator, List, Optional

from .elements import Link, Node
from .graph import WeightedGraph

__all__ = ['parse_graph_description', 'load_graph']

_TOKEN_SEPARATOR = re.compile(r'[\s,()]+')
_COMMENT = re.compile(r'#.*$', re.MULTILINE)

NODE = 'NODE'
EDGE = 'EDGE'


def _tokens(text: str) -> List[str]:
    return [t for t in _TOKEN_SEPARATOR.split(_COMMENT.sub('', text)) if t]


def _take(tokens: Iterator[str], count: int) -> List[str]:
    out = []
    for _ in range(count):
        tok = next(tokens, None)
        if tok is None:
            break
        out.append(tok)
    return out


def parse_graph_description(text: str, logger: Optional[logging.Logger] = None) -> WeightedGraph:
    """Build the physical network described by ``text``."""

    log = logger or logging.getLogger(__name__)
    graph = WeightedGraph()
    nodes: Dict[str, int] = {}
    tokens = iter(_tokens(text))
    for tok in tokens:
        if tok == NODE:
            fields = _take(tokens, 3)
            if len(fields) < 3:
                log.warning("truncated NODE record: %s", ' '.join(fields))
                continue
            name, xs, ys = fields
            try:
                x, y = float(xs), float(ys)
            except ValueError:
                log.warning("skipping NODE %s: bad coordinates (%s, %s)", name, xs, ys)
                continue
            if name in nodes:
                log.warning("skipping duplicate NODE %s", name)
                continue
            nodes[name] = graph.insert_vertex(Node(name, x, y))
        elif tok == EDGE:
            fields = _take(tokens, 2)
            if len(fields) < 2:
                log.warning("truncated EDGE record: %s", ' '.join(fields))
                continue
            src, dst = fields
            if src not in nodes or dst not in nodes:
                log.warning("skipping EDGE %s %s: unknown node", src, dst)
                continue
            if graph.insert_edge(nodes[src], nodes[dst], Link(src + dst)) is None:
                log.warning("skipping EDGE %s %s: not a valid link", src, dst)
        else:
            log.debug("ignoring token %r", tok)
    return graph


def load_graph(path: str, logger: Optional[logging.Logger] = None) -> WeightedGraph:
    with open(path, 'r') as f:
        text = f.read()
    return parse_graph_description(text, logger=logger)
