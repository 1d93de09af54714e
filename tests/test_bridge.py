import pytest

from structural_patterns.bridge import (
    FAST_FORWARD,
    FAST_REWIND,
    MAXIMUM_CHANNEL,
    MAXIMUM_VOLUME,
    MINIMUM_CHANNEL,
    MINIMUM_VOLUME,
    REWIND,
    Movie,
    RadioDevice,
    Remote,
    TVDevice,
    TVRemote,
    change_channel_to,
    change_volume_to,
    main,
)


def test_movie_defaults():
    movie = Movie()
    assert movie.name == "How to Code"
    assert movie.current_duration == 0
    assert movie.total_duration == 60


def test_device_defaults():
    radio = RadioDevice()
    assert radio.is_muted is True
    assert radio.is_powered is False
    assert (radio.volume, radio.channel) == (1, 1)
    tv = TVDevice()
    assert tv.movie is None
    assert tv.is_playing is False


def test_toggle_power_round_trip(capsys):
    radio = RadioDevice()
    remote = Remote(radio)
    assert remote.toggle_power(radio) is True
    assert remote.toggle_power(radio) is False
    out = capsys.readouterr().out
    assert "Remote Device is ON" in out
    assert "Remote Device is OFF" in out


def test_tv_remote_power_message(capsys):
    tv = TVDevice()
    remote = TVRemote(tv)
    assert remote.toggle_power(tv) is True
    assert "TV Remote Device is ON" in capsys.readouterr().out


def test_toggle_mute(capsys):
    radio = RadioDevice()
    remote = Remote(radio)
    assert remote.toggle_mute(radio) is False
    assert "Remote Device is UNMUTED" in capsys.readouterr().out
    assert remote.toggle_mute(radio) is True


@pytest.mark.parametrize("remote_cls", [Remote, TVRemote])
def test_volume_is_clamped(remote_cls):
    device = TVDevice(volume=MAXIMUM_VOLUME)
    remote = remote_cls(device)
    assert remote.volume_up(device) == MAXIMUM_VOLUME
    device.volume = MINIMUM_VOLUME
    assert remote.volume_down(device) == MINIMUM_VOLUME
    assert remote.volume_up(device) == MINIMUM_VOLUME + 1


@pytest.mark.parametrize("remote_cls", [Remote, TVRemote])
def test_channel_is_clamped(remote_cls):
    device = RadioDevice(channel=MAXIMUM_CHANNEL)
    remote = remote_cls(device)
    assert remote.channel_up(device) == MAXIMUM_CHANNEL
    assert remote.channel_down(device) == MAXIMUM_CHANNEL - 1
    device.channel = MINIMUM_CHANNEL
    assert remote.channel_down(device) == MINIMUM_CHANNEL


def test_toggle_play_requires_tv():
    radio = RadioDevice()
    with pytest.raises(TypeError):
        TVRemote(radio).toggle_play(radio)


def test_toggle_play_round_trip():
    tv = TVDevice()
    remote = TVRemote(tv)
    assert remote.toggle_play(tv) is True
    assert remote.toggle_play(tv) is False


def test_seek_without_movie_raises():
    tv = TVDevice()
    with pytest.raises(ValueError):
        TVRemote(tv).rewind(tv)


def test_rewind_and_fast_rewind_stop_at_start():
    movie = Movie(current_duration=50, total_duration=90)
    tv = TVDevice(movie=movie)
    remote = TVRemote(tv)
    assert remote.rewind(tv) == 50 - REWIND
    assert remote.fast_rewind(tv) == 50 - REWIND - FAST_REWIND
    movie.current_duration = 0.1
    assert remote.fast_rewind(tv) == 0
    assert remote.rewind(tv) == 0


def test_fast_forward_stops_at_end():
    movie = Movie(current_duration=50, total_duration=90)
    tv = TVDevice(movie=movie)
    remote = TVRemote(tv)
    assert remote.fast_forward(tv) == 50 + FAST_FORWARD
    movie.current_duration = 89.9
    assert remote.fast_forward(tv) == movie.total_duration


def test_change_volume_to_steps():
    remote = Remote(RadioDevice())
    steps = change_volume_to(remote, 4)
    assert steps == [2, 3, 4]
    assert remote.device.volume == 4


def test_change_channel_to_goes_down():
    remote = Remote(RadioDevice(channel=12))
    steps = change_channel_to(remote, 10)
    assert steps == [11, 10]
    assert remote.device.channel == 10


def test_change_to_current_value_ends_on_target():
    remote = Remote(RadioDevice(channel=5))
    assert change_channel_to(remote, 5)[-1] == 5
    assert remote.device.channel == 5


@pytest.mark.parametrize("target", [MINIMUM_CHANNEL - 1, MAXIMUM_CHANNEL + 1])
def test_change_channel_out_of_range(target):
    with pytest.raises(ValueError):
        change_channel_to(Remote(RadioDevice()), target)


@pytest.mark.parametrize("target", [MINIMUM_VOLUME - 1, MAXIMUM_VOLUME + 1])
def test_change_volume_out_of_range(target):
    with pytest.raises(ValueError):
        change_volume_to(Remote(RadioDevice()), target)


def test_main_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Current device:") == 3
    assert "TVDevice is PLAYING" in out