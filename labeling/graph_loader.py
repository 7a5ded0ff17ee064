"""
Graph data structures and edge-list loader
Small dense-id graphs for labeling searches
"""

import os
import requests
from typing import List, Dict, Tuple, Iterable
import numpy as np


def _is_vertex_id(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Graph:
    """Undirected graph over dense vertex ids 0..n-1"""
    def __init__(self, n: int = 0):
        self.edges: List[Tuple[int, int]] = []
        self.adj: Dict[int, List[int]] = {v: [] for v in range(n)}

    def _add_edge(self, u: int, v: int):
        self.edges.append((u, v))
        self.adj[u].append(v)
        self.adj[v].append(u)

    @classmethod
    def build_from_edges(cls, edges: Iterable, order: int = None) -> "Graph":
        """
        Build a graph from a list of (u, v) pairs

        Args:
            edges: iterable of integer pairs
            order: number of vertices (None = max id + 1, ids must be dense)

        Raises:
            ValueError: malformed pair, negative/out-of-range id, self-loop,
                or a gap in the ids when no order is given
        """
        pairs = []
        for i, edge in enumerate(edges):
            try:
                u, v = edge
            except (TypeError, ValueError):
                raise ValueError(f"Edge #{i} is not a pair of vertex ids: {edge!r}")
            if not (_is_vertex_id(u) and _is_vertex_id(v)):
                raise ValueError(f"Edge #{i} has non-integer vertex ids: {edge!r}")
            u, v = int(u), int(v)
            if u < 0 or v < 0:
                raise ValueError(f"Edge #{i} has a negative vertex id: ({u}, {v})")
            if u == v:
                raise ValueError(f"Edge #{i} is a self-loop on vertex {u}")
            pairs.append((u, v))

        seen = {x for pair in pairs for x in pair}
        if order is None:
            order = max(seen) + 1 if seen else 0
            missing = sorted(set(range(order)) - seen)
            if missing:
                raise ValueError(f"Vertex ids must be dense from 0; missing {missing}")
        else:
            if order < 0:
                raise ValueError(f"Graph order must be non-negative, got {order}")
            out_of_range = sorted(x for x in seen if x >= order)
            if out_of_range:
                raise ValueError(f"Vertex ids {out_of_range} out of range for order {order}")

        graph = cls(order)
        for u, v in pairs:
            graph._add_edge(u, v)
        return graph

    @classmethod
    def build_wheel(cls, n: int) -> "Graph":
        """
        Wheel W_n: hub 0 joined to every vertex of the cycle 1..n
        Cycle edges are inserted first, then the spokes
        """
        if n < 3:
            raise ValueError(f"A wheel needs an outer cycle of length >= 3, got {n}")

        edges = [(i, i + 1) for i in range(1, n)]
        edges.append((n, 1))
        edges.extend((0, i) for i in range(1, n + 1))
        return cls.build_from_edges(edges, order=n + 1)

    def neighbors(self, v: int) -> List[int]:
        return self.adj[v]

    def order(self) -> int:
        return len(self.adj)

    def size(self) -> int:
        return len(self.edges)

    def degrees(self) -> np.ndarray:
        return np.array([len(self.adj[v]) for v in range(self.order())], dtype=int)

    def max_degree(self) -> int:
        """Δ(G), 0 for the empty graph"""
        if self.order() == 0:
            return 0
        return int(self.degrees().max())

    def is_connected(self) -> bool:
        if self.order() <= 1:
            return True

        visited = set()
        stack = [0]

        while stack:
            v = stack.pop()
            if v in visited:
                continue
            visited.add(v)
            stack.extend(self.adj[v])

        return len(visited) == self.order()

    def __repr__(self):
        return f"Graph(V={self.order()}, E={self.size()})"


def format_adjacency_list(graph: Graph) -> str:
    """One 'v: n1 n2 ...' line per vertex"""
    lines = []
    for v in range(graph.order()):
        neighbors = " ".join(str(u) for u in graph.neighbors(v))
        lines.append(f"{v}: {neighbors}".rstrip())
    return "\n".join(lines)


class EdgeListLoader:
    """Load graphs from whitespace-separated edge lists"""

    SAMPLE_GRAPHS = {
        'triangle': {
            'edges': [(0, 1), (1, 2), (2, 0)],
            'description': 'Complete graph K3'
        },
        'path2': {
            'edges': [(0, 1)],
            'description': 'Single edge P2'
        },
        'path3': {
            'edges': [(0, 1), (1, 2)],
            'description': 'Path P3'
        },
        'path4': {
            'edges': [(0, 1), (1, 2), (2, 3)],
            'description': 'Path P4'
        },
        'star3': {
            'edges': [(0, 1), (0, 2), (0, 3)],
            'description': 'Star K_{1,3}'
        },
        'cycle4': {
            'edges': [(0, 1), (1, 2), (2, 3), (3, 0)],
            'description': 'Cycle C4'
        },
        'cycle5': {
            'edges': [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)],
            'description': 'Cycle C5 (not graceful)'
        },
        'k4': {
            'edges': [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)],
            'description': 'Complete graph K4'
        },
        'petersen': {
            'edges': [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
                      (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
                      (5, 7), (7, 9), (9, 6), (6, 8), (8, 5)],
            'description': 'Petersen graph (10 vertices, 15 edges)'
        }
    }

    def __init__(self, data_dir: str = './data', use_cache: bool = True,
                 verbose: bool = False):
        self.data_dir = data_dir
        self.use_cache = use_cache
        self.verbose = verbose
        self.truncated = False

    def parse_edges(self, text: str) -> List[Tuple[int, int]]:
        """
        Read integer pairs until the end of the stream

        A non-integer token or an unpaired final token ends the edge list
        at that point; the rest of the input is ignored.
        """
        self.truncated = False
        edges = []
        pending = None

        for token in text.split():
            try:
                value = int(token)
            except ValueError:
                self._warn_truncated(f"non-integer token {token!r}", len(edges))
                return edges

            if pending is None:
                pending = value
            else:
                edges.append((pending, value))
                pending = None

        if pending is not None:
            self._warn_truncated(f"unpaired trailing id {pending}", len(edges))

        return edges

    def _warn_truncated(self, reason: str, kept: int):
        self.truncated = True
        if self.verbose:
            print(f"⚠ Edge list truncated at {reason} ({kept} edges kept)")

    def load_text(self, text: str, order: int = None) -> Graph:
        graph = Graph.build_from_edges(self.parse_edges(text), order=order)
        if self.verbose:
            self._print_statistics("text input", graph)
        return graph

    def load_file(self, path: str, order: int = None) -> Graph:
        """Load a graph from an edge-list file"""
        with open(path, 'r') as f:
            text = f.read()

        graph = Graph.build_from_edges(self.parse_edges(text), order=order)
        if self.verbose:
            self._print_statistics(os.path.basename(path), graph)
        return graph

    def load_url(self, url: str, order: int = None) -> Graph:
        """Download an edge list (kept under data_dir) and load it"""
        path = self._download(url)
        return self.load_file(path, order=order)

    def _download(self, url: str) -> str:
        os.makedirs(self.data_dir, exist_ok=True)
        filename = os.path.basename(url.rstrip('/')) or 'edges.txt'
        path = os.path.join(self.data_dir, filename)

        if self.use_cache and os.path.exists(path):
            if self.verbose:
                print(f"✓ Found cached {filename}")
            return path

        if self.verbose:
            print(f"Downloading {url}...")

        try:
            response = requests.get(url, timeout=30)
            response.raise_for_status()

            with open(path, 'w') as f:
                f.write(response.text)

        except Exception as e:
            if self.verbose:
                print(f"✗ Download failed: {e}")
            raise

        if self.verbose:
            print(f"✓ Saved to {path}")

        return path

    def load_sample(self, name: str) -> Graph:
        if name not in self.SAMPLE_GRAPHS:
            raise ValueError(f"Unknown sample graph: {name}. "
                             f"Available: {sorted(self.SAMPLE_GRAPHS)}")

        graph = Graph.build_from_edges(self.SAMPLE_GRAPHS[name]['edges'])
        if self.verbose:
            self._print_statistics(name, graph)
        return graph

    def _print_statistics(self, name: str, graph: Graph):
        """Print graph statistics"""
        degrees = graph.degrees()

        print(f"\n{'='*60}")
        print(f"Graph '{name}'")
        print(f"{'='*60}")
        print(f"Order: {graph.order()}")
        print(f"Size: {graph.size()}")
        if len(degrees) > 0:
            print(f"Degree: {np.mean(degrees):.1f} ± {np.std(degrees):.1f}")
            print(f"  Min/Max: {degrees.min()} / {degrees.max()}")
        print(f"Connected: {graph.is_connected()}")
        print(f"{'='*60}\n")
