from pinsetup.models.board import BoardProfile


class PinValidator:
    """
    Checks candidate pin numbers against the legal pin set of a board profile
    """
    def __init__(self, board: BoardProfile):
        self.board = board

    def is_legal(self, pin: int) -> bool:
        """
        True if the pin exists on the board. Defined for any integer, negative and out of range values are not
        legal.
        """
        if isinstance(pin, bool) or not isinstance(pin, int):
            return False
        return self.board.is_legal(pin)

    def __contains__(self, pin: int) -> bool:
        return self.is_legal(pin)
