"""HTTP layer — query serialization and the authenticated transport.

Services shape calls; the transport is the only code that touches the
network.
"""
