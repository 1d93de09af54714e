"""Remote controls (the abstraction) driving TV and radio devices (the implementation)."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

MAXIMUM_VOLUME = 10
MINIMUM_VOLUME = 0

MAXIMUM_CHANNEL = 100
MINIMUM_CHANNEL = 1

REWIND = 1.0
FAST_FORWARD = 0.25
FAST_REWIND = 0.25


@dataclass
class Movie:
    """A movie; durations are in minutes."""

    name: str = "How to Code"
    current_duration: float = 0.0
    total_duration: float = 60.0


@dataclass(kw_only=True)
class Device:
    """State shared by every device a remote can drive."""

    is_muted: bool = True
    is_powered: bool = False
    volume: int = 1
    channel: int = 1


@dataclass(kw_only=True)
class RadioDevice(Device):
    """A radio: a device with no features beyond the common ones."""


@dataclass(kw_only=True)
class TVDevice(Device):
    """A television that can play a movie."""

    movie: Movie | None = None
    is_playing: bool = False


@dataclass
class Remote:
    """A basic remote that delegates its work to a device."""

    device: Device
    _power_label: str = field(default="Remote Device", init=False, repr=False)

    def toggle_power(self, device: Device) -> bool:
        """Switch the device on or off and return the new power state."""
        device.is_powered = not device.is_powered
        state = "ON" if device.is_powered else "OFF"
        print(f"{self._power_label} is {state}")
        return device.is_powered

    def toggle_mute(self, device: Device) -> bool:
        """Mute or unmute the device and return the new mute state."""
        device.is_muted = not device.is_muted
        state = "MUTED" if device.is_muted else "UNMUTED"
        print(f"Remote Device is {state}")
        return device.is_muted

    def volume_up(self, device: Device) -> int:
        """Raise the volume by one, up to the maximum."""
        if device.volume < MAXIMUM_VOLUME:
            device.volume += 1
        return device.volume

    def volume_down(self, device: Device) -> int:
        """Lower the volume by one, down to the minimum."""
        if device.volume > MINIMUM_VOLUME:
            device.volume -= 1
        return device.volume

    def channel_up(self, device: Device) -> int:
        """Move one channel up, up to the last channel."""
        if device.channel < MAXIMUM_CHANNEL:
            device.channel += 1
        return device.channel

    def channel_down(self, device: Device) -> int:
        """Move one channel down, down to the first channel."""
        if device.channel > MINIMUM_CHANNEL:
            device.channel -= 1
        return device.channel


@dataclass
class TVRemote(Remote):
    """A remote with playback controls for a TV device."""

    _power_label: str = field(default="TV Remote Device", init=False, repr=False)

    @staticmethod
    def _tv(device: Device) -> TVDevice:
        if not isinstance(device, TVDevice):
            raise TypeError(f"{type(device).__name__} is not a TV device")
        return device

    @classmethod
    def _movie(cls, device: Device) -> Movie:
        movie = cls._tv(device).movie
        if movie is None:
            raise ValueError("the TV device has no movie loaded")
        return movie

    def toggle_play(self, device: Device) -> bool:
        """Start or stop playback and return whether the TV is playing."""
        tv = self._tv(device)
        tv.is_playing = not tv.is_playing
        print("TVDevice is PLAYING" if tv.is_playing else "TVDevice is NOT PLAYING")
        return tv.is_playing

    def _seek_back(self, device: Device, amount: float) -> float:
        movie = self._movie(device)
        movie.current_duration = max(0.0, movie.current_duration - amount)
        return movie.current_duration

    def rewind(self, device: Device) -> float:
        """Go back one minute, not past the start."""
        return self._seek_back(device, REWIND)

    def fast_rewind(self, device: Device) -> float:
        """Go back a quarter of a minute, not past the start."""
        return self._seek_back(device, FAST_REWIND)

    def fast_forward(self, device: Device) -> float:
        """Skip a quarter of a minute ahead, not past the end."""
        movie = self._movie(device)
        movie.current_duration = min(
            movie.total_duration, movie.current_duration + FAST_FORWARD
        )
        return movie.current_duration


def change_channel_to(remote: Remote, channel: int) -> list[int]:
    """Step the remote's device to ``channel``, returning each channel passed."""
    if not MINIMUM_CHANNEL <= channel <= MAXIMUM_CHANNEL:
        raise ValueError(
            f"channel {channel} is outside {MINIMUM_CHANNEL}..{MAXIMUM_CHANNEL}"
        )
    device = remote.device
    steps = []
    while True:
        if device.channel < channel:
            remote.channel_up(device)
        else:
            remote.channel_down(device)
        print(device.channel)
        steps.append(device.channel)
        if device.channel == channel:
            return steps


def change_volume_to(remote: Remote, volume: int) -> list[int]:
    """Step the remote's device to ``volume``, returning each volume passed."""
    if not MINIMUM_VOLUME <= volume <= MAXIMUM_VOLUME:
        raise ValueError(
            f"volume {volume} is outside {MINIMUM_VOLUME}..{MAXIMUM_VOLUME}"
        )
    device = remote.device
    steps = []
    while True:
        if device.volume < volume:
            remote.volume_up(device)
        else:
            remote.volume_down(device)
        print(device.volume)
        steps.append(device.volume)
        if device.volume == volume:
            return steps


def main(argv: list[str] | None = None) -> int:
    """Drive a radio and a TV through their remotes."""
    if argv is None:
        argv = sys.argv[1:]

    radio_remote = Remote(RadioDevice())
    radio_remote.toggle_power(radio_remote.device)
    radio_remote.toggle_mute(radio_remote.device)
    change_volume_to(radio_remote, 4)
    change_channel_to(radio_remote, 10)

    tv = TVDevice(movie=Movie("Code is Awesome: The Movie", 50, 90))
    tv_remote = TVRemote(tv)
    tv_remote.toggle_power(tv_remote.device)
    tv_remote.toggle_mute(tv_remote.device)
    tv_remote.toggle_play(tv_remote.device)
    change_volume_to(tv_remote, 7)
    change_channel_to(tv_remote, 50)

    for seek in (tv_remote.fast_rewind, tv_remote.fast_forward, tv_remote.rewind):
        position = seek(tv)
        print(f"Current device: {position:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())