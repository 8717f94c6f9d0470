"""Store base and form helpers."""

from collections.abc import Mapping
from typing import Any, TypeAlias

from hrmodule.cancel import CancelToken
from hrmodule.http.transport import RequestOptions

FormValues: TypeAlias = Mapping[str, Any] | None


def pick(form: FormValues, *keys: str) -> dict[str, Any]:
    """Select the filter fields a list call understands from a form."""
    form = form or {}
    return {key: form.get(key) for key in keys}


def call_options(cancel: CancelToken | None) -> RequestOptions | None:
    return RequestOptions(cancel=cancel) if cancel is not None else None


class Store:
    """Named facade registered in a module descriptor."""

    name: str = ""

    __slots__ = ()

    def reset(self) -> None:
        """No-op. Stores retain nothing between calls."""
