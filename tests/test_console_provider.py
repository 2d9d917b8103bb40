"""Tests for the console channel provider."""

import pytest

from cqrs_ddd_channels.communication import Attachment, EmailCommunication, SmsCommunication
from cqrs_ddd_channels.identity import as_identity_address
from cqrs_ddd_channels.memory.console import ConsoleChannelProvider


@pytest.mark.asyncio
async def test_console_provider_prints_sms(capsys):
    provider = ConsoleChannelProvider()

    reports = await provider.dispatch(
        SmsCommunication(
            from_address=as_identity_address("+15550000000"),
            to=(as_identity_address("+1234567890"),),
            message="Test body",
        )
    )

    captured = capsys.readouterr()
    assert "COMMUNICATION VIA SMS" in captured.out
    assert "+1234567890" in captured.out
    assert "Test body" in captured.out
    assert reports[0].provider_id == "console-debug"


@pytest.mark.asyncio
async def test_console_provider_with_html_and_attachments(capsys):
    provider = ConsoleChannelProvider()

    await provider.dispatch(
        EmailCommunication(
            from_address=None,
            to=(as_identity_address("user@example.com"),),
            subject="Test Subject",
            text_body="Plain text",
            html_body="<html><body>HTML content</body></html>",
            attachments=(
                Attachment(name="file.pdf", content_type="application/pdf", content=b"%PDF"),
            ),
        )
    )

    captured = capsys.readouterr()
    assert "Test Subject" in captured.out
    assert "HTML:" in captured.out
    assert "Files:" in captured.out
    assert "file.pdf" in captured.out


@pytest.mark.asyncio
async def test_console_provider_can_stay_quiet(capsys):
    provider = ConsoleChannelProvider(output_to_stdout=False)

    await provider.dispatch(
        SmsCommunication(from_address=None, to=(), message="quiet")
    )

    assert capsys.readouterr().out == ""
