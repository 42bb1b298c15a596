"""Tests for copying cheat contents."""

import asyncio
from unittest.mock import patch

import pytest

from cheathub.services.clipboard import ClipboardService
from cheathub.services.disclosure import ResultDisclosureState
from cheathub.services.errors import ClipboardError

from helpers import RecordingClipboard


@pytest.mark.asyncio
async def test_copy_writes_content_and_marks_entry() -> None:
    writer = RecordingClipboard()
    disclosure = ResultDisclosureState(copy_feedback_delay=0.05)
    service = ClipboardService(writer, disclosure)
    
    copied = await service.copy("04000000 00123456 0000270F", "1")
    
    assert copied is True
    assert writer.writes == ["04000000 00123456 0000270F"]
    assert disclosure.is_copied("1")
    assert not disclosure.is_copied("2")
    
    await asyncio.sleep(0.15)
    assert not disclosure.is_copied("1")


@pytest.mark.asyncio
async def test_failed_write_is_logged_and_swallowed() -> None:
    writer = RecordingClipboard(fail_with=RuntimeError("clipboard unavailable"))
    disclosure = ResultDisclosureState()
    service = ClipboardService(writer, disclosure)
    
    with patch("cheathub.services.errors.log") as mock_logger:
        copied = await service.copy("content", "1")
    
    assert copied is False
    assert disclosure.copied == frozenset()
    assert mock_logger.warning.called
    kwargs = mock_logger.warning.call_args.kwargs
    assert kwargs["category"] == "clipboard"
    assert "RuntimeError: clipboard unavailable" in kwargs["technical_details"]


@pytest.mark.asyncio
async def test_clipboard_error_is_kept_as_is() -> None:
    writer = RecordingClipboard(fail_with=ClipboardError("terminal refused OSC 52"))
    service = ClipboardService(writer, ResultDisclosureState())
    
    with patch("cheathub.services.errors.log") as mock_logger:
        copied = await service.copy("content", "1")
    
    assert copied is False
    assert mock_logger.warning.call_args.kwargs["error_message"] == "terminal refused OSC 52"
