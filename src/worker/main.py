"""Worker service entry point: emails saved cover letter drafts."""

import asyncio
import sys
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from adapter.email.factory import create_email_sender
from adapter.storage.r2 import R2BlobStorage
from utils.config import EmailSettings, StorageSettings
from utils.logging import setup_structured_logging
from worker.email_processor import run_email_loop

load_dotenv()
setup_structured_logging()

logger = logging.getLogger(__name__)


def main():
    """Main entry point for worker service."""
    logger.info("Starting email worker service...")

    try:
        storage_settings = StorageSettings.from_env()
        if not storage_settings.is_configured:
            logger.error("Cannot start worker: R2 storage is not configured")
            sys.exit(1)

        email_settings = EmailSettings.from_env()
        storage = R2BlobStorage(storage_settings)
        sender = create_email_sender(email_settings)

        asyncio.run(run_email_loop(storage, sender, email_settings))
    except KeyboardInterrupt:
        logger.info("Worker stopped")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
