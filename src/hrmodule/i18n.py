"""Host locale table.

Messages are stored per locale tag as nested mappings. Each module owns
one top-level namespace (its id), so ``hr.menu.calendar`` lives under
``messages["en-US"]["hr"]["menu"]["calendar"]``.

Merging replaces whole namespaces: a module's second bundle supersedes
its first completely, so keys dropped between versions do not linger.
"""

import copy
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

logger = logging.getLogger("hrmodule.i18n")


def _lookup(messages: Mapping[str, Any], key: str) -> str | None:
    """Resolve a dotted *key*, preferring literal keys at each level.

    Flat bundles (``{"menu.calendar": "Calendar"}``) and nested bundles
    (``{"menu": {"calendar": "Calendar"}}``) both resolve.
    """
    if key in messages:
        value = messages[key]
        return value if isinstance(value, str) else None
    head, sep, rest = key.partition(".")
    while sep:
        child = messages.get(head)
        if isinstance(child, Mapping):
            found = _lookup(child, rest)
            if found is not None:
                return found
        nxt, sep, rest = rest.partition(".")
        head = f"{head}.{nxt}"
    return None


class LocaleTable:
    """Live per-locale message table of the host application."""

    __slots__ = ("_fallback", "_locale", "_messages")

    def __init__(self, locale: str = "en-US", *, fallback: str = "en-US") -> None:
        self._messages: dict[str, dict[str, Any]] = {}
        self._locale = locale
        self._fallback = fallback

    @property
    def locale(self) -> str:
        """The active locale tag used when ``translate`` gets none."""
        return self._locale

    @locale.setter
    def locale(self, tag: str) -> None:
        self._locale = tag

    @property
    def locales(self) -> list[str]:
        return sorted(self._messages)

    def merge_locale_message(self, tag: str, messages: Mapping[str, Any]) -> None:
        """Merge *messages* into locale *tag*, replacing each top-level key.

        Namespaces not mentioned in *messages* are left untouched. The
        merged values are deep-copied, so later changes to the caller's
        mapping never leak into the table.
        """
        table = self._messages.setdefault(tag, {})
        for namespace, bundle in messages.items():
            if namespace in table:
                logger.debug("Replacing %s messages for namespace %r", tag, namespace)
            table[namespace] = copy.deepcopy(_thaw(bundle))

    def messages(self, tag: str) -> Mapping[str, Any]:
        """Read-only view of the merged messages for *tag*."""
        return MappingProxyType(self._messages.get(tag, {}))

    def translate(self, key: str, tag: str | None = None) -> str:
        """Resolve *key* in *tag* (or the active locale), then the fallback.

        Missing keys return the key itself, which keeps untranslated
        menu entries visible instead of blank.
        """
        for candidate in (tag or self._locale, self._fallback):
            found = _lookup(self._messages.get(candidate, {}), key)
            if found is not None:
                return found
        logger.debug("Missing translation for %r", key)
        return key


def _thaw(value: Any) -> Any:
    """Turn read-only mapping proxies back into plain dicts for storage."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value
