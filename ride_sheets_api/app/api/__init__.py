"""
API package containing versioned routes.

``v1`` holds the routers; ``deps`` builds the per‑request services
injected into handlers and ``validation`` checks request bodies for
required fields.
"""
