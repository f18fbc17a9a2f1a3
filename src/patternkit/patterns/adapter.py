"""Adapter pattern.

An ``AudioPlayer`` only knows how to play mp3 files. Richer players with an
incompatible interface (``play_vlc`` / ``play_mp4``) are made usable by
wrapping them in a ``MediaAdapter`` that speaks the ``MediaPlayer`` interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from patternkit.logging.logger import get_logger

logger = get_logger(__name__)


class MediaPlayer(ABC):
    """Interface the client code expects."""

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> Optional[str]:
        """Play a file of the given type."""


class AdvancedMediaPlayer(ABC):
    """Incompatible interface offered by the advanced players."""

    @abstractmethod
    def play_vlc(self, file_name: str) -> Optional[str]:
        pass

    @abstractmethod
    def play_mp4(self, file_name: str) -> Optional[str]:
        pass


class VlcPlayer(AdvancedMediaPlayer):

    def play_vlc(self, file_name: str) -> str:
        message = f"Playing vlc file. Name: {file_name}"
        print(message)
        return message

    def play_mp4(self, file_name: str) -> None:
        return None


class Mp4Player(AdvancedMediaPlayer):

    def play_vlc(self, file_name: str) -> None:
        return None

    def play_mp4(self, file_name: str) -> str:
        message = f"Playing mp4 file. Name: {file_name}"
        print(message)
        return message


class MediaAdapter(MediaPlayer):
    """Makes an AdvancedMediaPlayer look like a MediaPlayer."""

    _players = {
        "vlc": VlcPlayer,
        "mp4": Mp4Player,
    }

    def __init__(self, audio_type: str):
        """
        Initialize the adapter for one advanced format.

        Args:
            audio_type: Format tag, either 'vlc' or 'mp4'

        Raises:
            ValueError: If no advanced player handles the format
        """
        key = audio_type.lower()
        if key not in self._players:
            raise ValueError(f"No advanced media player for '{audio_type}'")
        self.audio_type = key
        self.advanced_player = self._players[key]()

    @classmethod
    def supports(cls, audio_type: str) -> bool:
        return audio_type.lower() in cls._players

    def play(self, audio_type: str, file_name: str) -> Optional[str]:
        key = audio_type.lower()
        if key == "vlc":
            return self.advanced_player.play_vlc(file_name)
        if key == "mp4":
            return self.advanced_player.play_mp4(file_name)
        return None


class AudioPlayer(MediaPlayer):
    """Client-facing player: mp3 built in, vlc/mp4 through the adapter."""

    def play(self, audio_type: Optional[str], file_name: str) -> Optional[str]:
        key = audio_type.lower() if audio_type else ""

        if key == "mp3":
            message = f"Playing mp3 file. Name: {file_name}"
            print(message)
            return message

        if key and MediaAdapter.supports(key):
            logger.debug("Routing %s playback through MediaAdapter", key)
            return MediaAdapter(key).play(key, file_name)

        print(f"Invalid media type. {audio_type} format not supported")
        return None


def demo() -> None:
    """Play one file of each kind, including an unsupported one."""
    player = AudioPlayer()
    for audio_type, file_name in [
        ("mp3", "beyond the horizon.mp3"),
        ("mp4", "alone.mp4"),
        ("vlc", "far far away.vlc"),
        ("avi", "mind me.avi"),
    ]:
        player.play(audio_type, file_name)
