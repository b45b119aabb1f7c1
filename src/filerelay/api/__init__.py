"""HTTP adapter helpers shared by relay routers."""

from .errors import register_error_handlers, relay_error_handler, relay_error_response

__all__ = ["register_error_handlers", "relay_error_handler", "relay_error_response"]
