"""HTML parsing for mod_status scoreboard pages."""

from .scoreboard import decode_row, locate_rows, parse_server_status, parse_worker_scores, validate_headers

__all__ = ["locate_rows", "validate_headers", "decode_row", "parse_worker_scores", "parse_server_status"]
