import typing as t


class MazeValidationError(Exception):
    pass


class DuplicateWallError(MazeValidationError):
    def __init__(self, collection: str, cell: t.Tuple[int, int], *args: object):
        super().__init__(
            f"Duplicate wall records in {collection} at ({cell[0]}, {cell[1]})", *args
        )
        self.collection = collection
        self.cell = cell


class CoordinateOutOfRangeError(ValueError):
    def __init__(self, cell: t.Tuple[int, int], width: int, height: int):
        super().__init__(
            f"Coordinate ({cell[0]}, {cell[1]}) is out of range "
            f"for a {width}x{height} grid"
        )
        self.cell = cell
        self.width = width
        self.height = height
