"""Per-call cancellation tokens.

A ``CancelToken`` is created by the caller and passed along with one or
more calls. Cancelling it aborts every call still in flight under it;
those calls fail with ``Cancelled``. A token cancelled before a call
starts makes that call fail immediately, without network I/O.

Tokens are not reusable: once cancelled they stay cancelled.
"""

import anyio

from hrmodule.errors import Cancelled


class CancelToken:
    """Externally owned cancellation signal for transport calls.

    Usage::

        token = CancelToken()
        async with anyio.create_task_group() as tg:
            tg.start_soon(store.get_leave_request, "lr-1", token)
            ...
            token.cancel()
    """

    __slots__ = ("_cancelled", "_reason", "_scopes")

    def __init__(self) -> None:
        self._cancelled = False
        self._reason = ""
        self._scopes: set[anyio.CancelScope] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str:
        return self._reason

    def cancel(self, reason: str = "") -> None:
        """Cancel every attached call. Idempotent."""
        if self._cancelled:
            return
        self._cancelled = True
        self._reason = reason
        for scope in list(self._scopes):
            scope.cancel()

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise Cancelled(self._reason or "Call cancelled")

    def attach(self, scope: anyio.CancelScope) -> None:
        """Bind a cancel scope to this token for the duration of one call."""
        if self._cancelled:
            scope.cancel()
            return
        self._scopes.add(scope)

    def detach(self, scope: anyio.CancelScope) -> None:
        self._scopes.discard(scope)
