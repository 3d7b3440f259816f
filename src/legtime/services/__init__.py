"""Service layer: the time operations the widget calls.

Services may import from domain and infrastructure layers.
They must never import from commands or output.

INVARIANT: every public display operation is total. Failures are logged
and reported through the documented sentinel, never raised. The one
exception is ``add_minutes_to_instant``, which is arithmetic and raises.
"""
