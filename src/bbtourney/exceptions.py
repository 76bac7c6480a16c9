class TournamentError(Exception):
    """Base class for errors raised while running a tournament."""


class DrawError(TournamentError):
    """The knockout draw could not produce a valid bracket."""
