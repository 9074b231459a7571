"""GetSongBPM API client for tempo, key and time signature lookups."""

from .client import GETSONGBPM_BASE_URL, GetSongBPMClient
from .models import SongTempo

__all__ = ["GetSongBPMClient", "SongTempo", "GETSONGBPM_BASE_URL"]
