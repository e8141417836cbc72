"""
Dijkstra search over implicitly generated graphs.

The frontier never supports priority decrease: every improvement of a node's
tentative distance pushes a fresh entry, and entries for nodes that have already
been finalized are discarded when popped (lazy deletion).

Equal-cost entries are popped in insertion order, so a given graph and
neighbor ordering always yields the same path.
"""

import heapq
import typing as t

T = t.TypeVar("T")


class HeapNode:
    def __init__(self, cost, element, uid):
        self.cost = cost
        self.element = element
        self.uid = uid

    def __lt__(self, other):
        # Lowest cost first, oldest entry first among equal costs
        return (self.cost, self.uid) < (other.cost, other.uid)

    def __repr__(self):
        return f"HeapNode(cost={self.cost}, element={self.element}, uid={self.uid})"


class PriorityQueue:
    def __init__(self):
        self.heap: t.List[HeapNode] = []
        self.next_uid = 1

    def push(self, cost, element):
        heapq.heappush(self.heap, HeapNode(cost, element, self.next_uid))
        self.next_uid += 1

    def pop(self) -> t.Tuple[t.Any, t.Any]:
        node = heapq.heappop(self.heap)
        return node.cost, node.element

    def __len__(self):
        return len(self.heap)

    def __bool__(self):
        return bool(self.heap)


def reconstruct_path(
    came_from: t.Dict[T, T], end: T, reverse: bool = True
) -> t.List[T]:
    path = [end]
    current = end
    while current in came_from:
        current = came_from[current]
        path.append(current)
    if reverse:
        path.reverse()
    return path


class SearchResult(t.NamedTuple):
    found: bool
    last: t.Any
    came_from: t.Dict[t.Any, t.Any]
    close_set: t.Set[t.Any]
    gscore: t.Dict[t.Any, float]


def new_generic_dijkstra(
    start: T,
    exit_condition: t.Callable[[T], bool],
    get_neighbors: t.Callable[[T], t.Iterable[t.Tuple[T, float]]],
) -> SearchResult:
    """Runs Dijkstra from ``start`` until ``exit_condition`` holds for a finalized
    node or the frontier is exhausted.

    :param get_neighbors: returns the outgoing ``(neighbor, edge_cost)`` pairs of a node
    :return: whether the exit condition was met, the last finalized node, and the
        predecessor map, finalized set and best-known distances
    """
    came_from: t.Dict[T, T] = dict()
    close_set: t.Set[T] = set()
    gscore: t.Dict[T, float] = {start: 0.0}
    open_queue = PriorityQueue()
    open_queue.push(0.0, start)
    current = None

    while open_queue:
        current_gscore, current = open_queue.pop()

        # Stale entry left over from an earlier relaxation
        if current in close_set:
            continue
        close_set.add(current)

        if exit_condition(current):
            return SearchResult(True, current, came_from, close_set, gscore)

        for neighbor, edge_cost in get_neighbors(current):
            if neighbor in close_set:
                continue
            tentative_g_score = current_gscore + edge_cost
            if neighbor not in gscore or tentative_g_score < gscore[neighbor]:
                came_from[neighbor] = current
                gscore[neighbor] = tentative_g_score
                open_queue.push(tentative_g_score, neighbor)

    # Goal could not be reached despite exploring the full search space
    return SearchResult(False, current, came_from, close_set, gscore)
