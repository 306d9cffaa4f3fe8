"""
HTTP request models for the API.

These are Pydantic models for validating and parsing API requests.
"""

from .create_plugin_request import CreatePluginRequest, parse_create_plugin_form

__all__ = [
    "CreatePluginRequest",
    "parse_create_plugin_form",
]
