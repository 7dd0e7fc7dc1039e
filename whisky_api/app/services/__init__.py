"""
Service layer.

The whisky store encapsulates every rule about the collection so the
API handlers only translate between HTTP and store calls.
"""
