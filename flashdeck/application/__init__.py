"""
Application layer.

The application layer orchestrates domain objects. It holds the use cases
exposed to the HTTP layer, the protocols infrastructure must implement, and
the application services the use cases compose.
"""
