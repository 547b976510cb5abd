"""Music and sound-effect instances and a mixer that keeps their volume in step."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class AudioCategory(enum.Enum):
    """Organisational category of a playing sound."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


class PlaybackMode(enum.Enum):
    """What happens when a sound reaches its end."""

    LOOP = "loop"
    DESPAWN = "despawn"


@dataclass(eq=False)
class AudioInstance:
    """One playing sound. ``sink_volume`` is the volume actually applied."""

    source: Any
    mode: PlaybackMode
    category: AudioCategory
    volume: float = 1.0
    sink_volume: float = 1.0


def music(source: Any) -> AudioInstance:
    """A looping instance in the music category."""
    return AudioInstance(source, PlaybackMode.LOOP, AudioCategory.MUSIC)


def sound_effect(source: Any) -> AudioInstance:
    """A one-shot instance in the sound-effect category, dropped when it ends."""
    return AudioInstance(source, PlaybackMode.DESPAWN, AudioCategory.SOUND_EFFECT)


class AudioMixer:
    """Keeps track of playing instances and applies the global volume to them.

    The optional ``backend`` does the actual playback and must provide
    ``start(instance)``, ``stop(instance)``, ``set_volume(instance, volume)``
    and ``is_playing(instance)``.
    """

    def __init__(self, backend: Any = None, global_volume: float = 1.0) -> None:
        self._backend = backend
        self._global_volume = float(global_volume)
        self._instances: list[AudioInstance] = []
        self._volume_changed = False

    @property
    def global_volume(self) -> float:
        return self._global_volume

    @property
    def instances(self) -> tuple[AudioInstance, ...]:
        return tuple(self._instances)

    def play(self, instance: AudioInstance) -> AudioInstance:
        """Start ``instance`` at the current global volume."""
        instance.sink_volume = self._global_volume * instance.volume
        if self._backend is not None:
            self._backend.start(instance)
        self._instances.append(instance)
        return instance

    def stop_category(self, category: AudioCategory) -> int:
        """Stop every instance of ``category`` and return how many were stopped."""
        stopped = [i for i in self._instances if i.category is category]
        self._instances = [i for i in self._instances if i.category is not category]
        if self._backend is not None:
            for instance in stopped:
                self._backend.stop(instance)
        return len(stopped)

    def set_global_volume(self, volume: float) -> None:
        """Change the global volume; running instances follow on the next update."""
        self._global_volume = float(volume)
        self._volume_changed = True

    def update(self) -> None:
        """Drop finished one-shot sounds and re-apply a changed global volume."""
        if self._backend is not None:
            self._instances = [
                i
                for i in self._instances
                if i.mode is not PlaybackMode.DESPAWN or self._backend.is_playing(i)
            ]
        if not self._volume_changed:
            return
        for instance in self._instances:
            instance.sink_volume = self._global_volume * instance.volume
            if self._backend is not None:
                self._backend.set_volume(instance, instance.sink_volume)
        self._volume_changed = False