import json
import math
import typing as t
from datetime import datetime
from decimal import Decimal

# Constants
DEFAULT_STEP_COST = 1.0

# Expansion order for grid moves: right, left, up, down
TAXI_NEIGHBORHOOD = ((1, 0), (-1, 0), (0, 1), (0, -1))


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class PathfinderLog:
    def __init__(self, message: str, query: int | None = None, timestamp=None):
        self.message = message
        self.query = query
        self.timestamp = timestamp if timestamp is not None else timestamp_string()

    def __str__(self):
        if self.query is None:
            return "'{}'".format(self.message)
        return "At query {}: '{}'".format(self.query, self.message)

    def toJSON(self):
        return json.dumps(self, default=lambda o: o.__dict__, sort_keys=True, indent=4)


class PathfinderLogger(list[PathfinderLog]):
    def __init__(self, printout: bool = True):
        super(PathfinderLogger, self).__init__()
        self.printout = printout

    def append(self, log: PathfinderLog):
        super(PathfinderLogger, self).append(log)
        if self.printout:
            print(log)

    def messages(self) -> t.List[str]:
        return [log.message for log in self]


def manhattan_distance(a, b, c_cost=DEFAULT_STEP_COST):
    return c_cost * (abs(b[0] - a[0]) + abs(b[1] - a[1]))


def is_in_matrix(cell, width, height):
    return 0 <= cell[0] < width and 0 <= cell[1] < height


def format_cost(cost: float) -> str:
    """Formats a path cost the way distances are reported on the command line:
    ``2.0`` for finite costs, ``Infinity`` when the goal is unreachable, and
    computerized scientific notation (``1.0E-5``, ``1.5E7``) outside [1e-3, 1e7).
    """
    cost = float(cost)
    if math.isnan(cost):
        return "NaN"
    if math.isinf(cost):
        return "Infinity" if cost > 0 else "-Infinity"
    if cost == 0 or 1e-3 <= abs(cost) < 1e7:
        return repr(cost)
    sign, digits, exponent = Decimal(repr(cost)).as_tuple()
    significant = "".join(str(d) for d in digits).rstrip("0") or "0"
    exponent += len(digits) - 1
    mantissa = significant[0] + "." + (significant[1:] or "0")
    return "{}{}E{}".format("-" if sign else "", mantissa, exponent)


def format_cell(cell: t.Sequence[int]) -> str:
    return "({}, {})".format(cell[0], cell[1])
