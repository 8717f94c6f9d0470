"""Module SDK — what a feature module hands to the host, and how it is merged.

Usage::

    from hrmodule.sdk import HostContext, register

    context = HostContext()
    register(context, descriptor)
"""

from hrmodule.sdk.context import HostContext, I18n, Router
from hrmodule.sdk.descriptor import ModuleDescriptor
from hrmodule.sdk.register import register

__all__ = ["HostContext", "I18n", "ModuleDescriptor", "Router", "register"]
