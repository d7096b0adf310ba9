"""Exceptions raised by the scoring engine."""


class ScoringError(Exception):
    """Base class for all scoring exceptions."""


class ThrowRejected(ScoringError):
    def __init__(self, token, cursor):
        self.token = token
        self.cursor = cursor
        super().__init__(f"Throw {token!r} is not valid at slot {cursor}.")


class GameOver(ThrowRejected):
    def __init__(self, token):
        super().__init__(token, 21)
        self.args = (f"The game is over; {token!r} was not recorded.",)
