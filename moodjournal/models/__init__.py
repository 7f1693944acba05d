# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.


from .user import User
from .journal import JournalEntry
