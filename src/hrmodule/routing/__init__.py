"""Routing — declarative route trees and the host route table.

Modules describe their navigation as ``RouteNode`` trees. The host's
``HostRouter`` flattens them into records indexed by name and by
resolved absolute path.
"""
