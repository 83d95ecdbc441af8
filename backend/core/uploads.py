"""
Disk storage for uploaded images (product photos, employee avatars)

Stored names are `<epoch-millis>-<sanitized original name>`. Two uploads of
the same original name within one millisecond get the same stored name and
the later one overwrites the earlier.
"""
import logging
import os
import re
from pathlib import Path

from django.core.files.storage import FileSystemStorage
from django.utils import timezone

logger = logging.getLogger('backend.core')

UNSAFE_FILENAME_CHARS = re.compile(r'[^A-Za-z0-9_\-.]')


def sanitize_filename(filename):
    """Replace every character outside [A-Za-z0-9_-.] with '_' and lower-case the result.

    Examples:
    - "IMG.PNG" -> "img.png"
    - "A B@C.JPG" -> "a_b_c.jpg"
    - "กุ้ง.jpg" -> "____.jpg"
    """
    return UNSAFE_FILENAME_CHARS.sub('_', filename or '').lower()


def current_millis():
    return int(timezone.now().timestamp() * 1000)


def build_stored_name(original_name, timestamp_ms=None):
    """Stored filename for an upload: `<epoch-millis>-<sanitized original name>`"""
    if timestamp_ms is None:
        timestamp_ms = current_millis()
    return f"{timestamp_ms}-{sanitize_filename(original_name)}"


def ensure_upload_dir(path):
    """Create an upload directory (and parents) if it is missing. Safe to call repeatedly."""
    directory = Path(path)
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created upload directory {directory}")
    return directory


class OverwritingStorage(FileSystemStorage):
    """FileSystemStorage that replaces an existing file instead of renaming the new one"""

    def get_valid_name(self, name):
        # names are already sanitized by build_stored_name
        return name

    def get_available_name(self, name, max_length=None):
        if self.exists(name):
            self.delete(name)
        return name


class ImageStore:
    """Writes uploaded files into one fixed directory and hands back the stored name"""

    def __init__(self, location):
        self.location = Path(location)
        self.storage = OverwritingStorage(location=str(self.location))

    def save(self, uploaded_file, timestamp_ms=None):
        stored_name = build_stored_name(uploaded_file.name, timestamp_ms)
        saved_name = self.storage.save(stored_name, uploaded_file)
        logger.info(f"Stored upload '{uploaded_file.name}' as {saved_name} in {self.location}")
        return saved_name

    def delete(self, stored_name):
        if stored_name and self.storage.exists(stored_name):
            self.storage.delete(stored_name)
            logger.info(f"Removed stored upload {stored_name} from {self.location}")

    def exists(self, stored_name):
        return self.storage.exists(stored_name)

    def path(self, stored_name):
        return self.storage.path(stored_name)

    def listdir(self):
        """Names of the regular files in the store directory"""
        if not self.location.exists():
            return []
        return sorted(
            entry.name for entry in os.scandir(self.location)
            if entry.is_file()
        )
