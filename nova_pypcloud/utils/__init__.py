"""Utility helpers for nova-pypcloud."""

from nova_pypcloud.utils.response import is_api_error, parse_response, unwrap_response

__all__ = ["is_api_error", "parse_response", "unwrap_response"]
