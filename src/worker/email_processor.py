"""Draft email processor - Worker service core logic.

Each cover letter draft saved to blob storage is one unit of work:

    list_blobs() → download() → parse → send_cover_letter() → delete()

A sent draft is deleted. A draft whose send failed stays in storage and is
picked up again on the next pass. A draft that cannot be parsed or lacks
email, name or letter is logged and deleted.
"""

import asyncio
import json
import logging
from dataclasses import dataclass

from domain.model.cover_letter import CoverLetterDraft
from port.blob_storage import BlobStorageError, BlobStoragePort
from port.email_sender import EmailSender
from services.email_service import send_cover_letter
from utils.config import EmailSettings

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 30


@dataclass
class ProcessingSummary:
    sent: int = 0
    failed: int = 0
    skipped: int = 0


def _discard(storage: BlobStoragePort, blob_name: str) -> None:
    storage.delete(blob_name)
    logger.warning("Invalid draft discarded", extra={"blobName": blob_name})


async def process_draft(
    storage: BlobStoragePort,
    sender: EmailSender,
    settings: EmailSettings,
    blob_name: str,
) -> bool | None:
    """Send one stored draft.

    Returns:
        True if sent and deleted, False if sending failed (draft kept),
        None if the draft was missing, or invalid and discarded.
    """
    content = storage.download(blob_name)
    if content is None:
        logger.warning("Draft disappeared before processing", extra={"blobName": blob_name})
        return None

    try:
        draft = CoverLetterDraft.from_dict(json.loads(content))
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("Draft is not valid JSON", extra={"blobName": blob_name, "error": str(e)})
        _discard(storage, blob_name)
        return None

    if not draft.is_complete():
        logger.error("Draft is missing email, name or cover letter", extra={"blobName": blob_name})
        _discard(storage, blob_name)
        return None

    sent = await send_cover_letter(
        sender,
        settings,
        to_email=draft.email,
        name=draft.name,
        cover_letter=draft.cover_letter,
        job_title=draft.job_title,
        company_name=draft.company_name,
    )
    if not sent:
        logger.warning("Draft kept for retry", extra={"blobName": blob_name, "recipient": draft.email})
        return False

    storage.delete(blob_name)
    logger.info("Draft processed", extra={"blobName": blob_name, "recipient": draft.email})
    return True


async def process_pending_drafts(
    storage: BlobStoragePort,
    sender: EmailSender,
    settings: EmailSettings,
) -> ProcessingSummary:
    summary = ProcessingSummary()
    for blob_name in storage.list_blobs():
        try:
            outcome = await process_draft(storage, sender, settings, blob_name)
        except BlobStorageError as e:
            logger.error("Storage error while processing draft", extra={"blobName": blob_name, "error": str(e)})
            outcome = False

        if outcome is True:
            summary.sent += 1
        elif outcome is False:
            summary.failed += 1
        else:
            summary.skipped += 1

    if summary.sent or summary.failed or summary.skipped:
        logger.info("Draft pass finished", extra={
            "sent": summary.sent, "failed": summary.failed, "skipped": summary.skipped,
        })
    return summary


async def run_email_loop(
    storage: BlobStoragePort,
    sender: EmailSender,
    settings: EmailSettings,
    poll_interval: float = POLL_INTERVAL_SECONDS,
) -> None:
    """Process pending drafts forever, pausing between passes."""
    logger.info("Email worker started, polling for drafts...")
    while True:
        try:
            await process_pending_drafts(storage, sender, settings)
        except Exception as e:
            # Keep polling; a storage outage should not kill the worker
            logger.error("Error in worker loop", extra={"error": str(e)}, exc_info=True)
        await asyncio.sleep(poll_interval)
