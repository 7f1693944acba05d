# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import os
from sqlalchemy.types import TypeDecorator, Text
from cryptography.fernet import Fernet, InvalidToken

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

logger = logging.getLogger(__name__)

# 🔐 Key for journal content at rest
FERNET_SECRET = os.getenv("FERNET_SECRET")

if not FERNET_SECRET:
    raise EnvironmentError("FERNET_SECRET is missing. Please set it in your environment or .env file.")

try:
    fernet = Fernet(FERNET_SECRET)
except Exception as e:
    raise ValueError("FERNET_SECRET is invalid. Make sure it is a valid 32-byte base64 string.") from e


class JournalDecryptionError(ValueError):
    """Stored journal text does not decrypt with the configured FERNET_SECRET."""


def encrypt_text(text: str) -> str:
    return fernet.encrypt(text.encode("utf-8")).decode("ascii")


def decrypt_text(token: str) -> str:
    try:
        return fernet.decrypt(token.encode("ascii")).decode("utf-8")
    except (InvalidToken, UnicodeError) as e:
        logger.error("🔐 Journal content could not be decrypted; was FERNET_SECRET rotated?")
        raise JournalDecryptionError("Stored journal content could not be decrypted") from e


class EncryptedText(TypeDecorator):
    """Text column holding Fernet ciphertext in the database and plain text in Python."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return encrypt_text(value) if value is not None else None

    def process_result_value(self, value, dialect):
        return decrypt_text(value) if value is not None else None
