"""
Response envelope helpers shared by every router.
"""
from typing import Any, Dict, Optional


def success_envelope(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Wrap a payload in the success envelope.

    Args:
        data: Payload to return under ``data`` (omitted when None)
        message: Optional human readable confirmation

    Returns:
        Dict: ``{"success": True, "data": ..., "message": ...}``
    """
    envelope: Dict[str, Any] = {"success": True}
    if data is not None:
        envelope["data"] = data
    if message is not None:
        envelope["message"] = message
    return envelope


def error_envelope(error: str) -> Dict[str, Any]:
    """Wrap an error message in the failure envelope."""
    return {"success": False, "error": error}
