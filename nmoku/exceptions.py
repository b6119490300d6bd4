class InvalidSize(Exception):
    """Raised when a board is created with a non-positive dimension"""

    def __init__(self, size: object, *args: object) -> None:
        self.size = size
        super().__init__(f"Board size must be a positive integer, got {size!r}", *args)
