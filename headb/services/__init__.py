"""Ownership-chain resolvers.

Each resolver validates ids, resolves its ancestors top-down and returns a
:class:`~headb.services.result.Ok` or :class:`~headb.services.result.Err`.
"""

from headb.services.result import Err, ErrorKind, Ok, Result, STATUS_CODES

__all__ = ["Err", "ErrorKind", "Ok", "Result", "STATUS_CODES"]
