"""Home-theater devices and a facade that drives them together."""

from __future__ import annotations

from typing import Optional


def _say(message: str) -> str:
    print(message)
    return message


class Amplifier:
    def __init__(self, tuner: Optional[Tuner] = None, player: Optional[StreamingPlayer] = None) -> None:
        self.tuner = tuner
        self.player = player
        self.is_on = False
        self.surround = False
        self.volume = 0

    def on(self) -> str:
        self.is_on = True
        return _say("Amplifier on")

    def off(self) -> str:
        self.is_on = False
        return _say("Amplifier off")

    def set_stereo_sound(self) -> str:
        self.surround = False
        return _say("Amplifier stereo sound on")

    def set_surround_sound(self) -> str:
        self.surround = True
        return _say("Amplifier surround sound on (5 speakers, 1 subwoofer")

    def set_volume(self, volume: int) -> str:
        self.volume = volume
        return _say(f"Amplifier setting volume to {volume}")

    def set_streaming_player(self, player: StreamingPlayer) -> str:
        self.player = player
        return _say("Amplifier setting Streaming Player to Player")


class StreamingPlayer:
    def __init__(self, amplifier: Optional[Amplifier] = None) -> None:
        self.amplifier = amplifier
        self.movie = ""
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return _say("Streaming Player on")

    def off(self) -> str:
        self.is_on = False
        return _say("Streaming Player off")

    def play(self, movie: str) -> str:
        self.movie = movie
        return _say(f'Streaming Player playing "{self.movie}"')

    def pause(self) -> str:
        return _say(f'Streaming Player paused "{self.movie}"')

    def stop(self) -> str:
        return _say(f'Streaming Player stooped "{self.movie}"')


class Projector:
    def __init__(self, player: Optional[StreamingPlayer] = None) -> None:
        self.player = player
        self.is_on = False
        self.wide_screen = False

    def on(self) -> str:
        self.is_on = True
        return _say("Projector on")

    def off(self) -> str:
        self.is_on = False
        return _say("Projector off")

    def tv_mode(self) -> str:
        self.wide_screen = False
        return _say("Projector is tv mode (4x3 aspect ratio)")

    def wide_screen_mode(self) -> str:
        self.wide_screen = True
        return _say("Projector is widescreen mode (16x9 aspect ratio)")


class Tuner:
    def __init__(self, amplifier: Optional[Amplifier] = None) -> None:
        self.amplifier = amplifier
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return _say("Tuner on")

    def off(self) -> str:
        self.is_on = False
        return _say("Tuner off")


class Screen:
    def __init__(self) -> None:
        self.is_down = False

    def up(self) -> str:
        self.is_down = False
        return _say("Theater Screen going up")

    def down(self) -> str:
        self.is_down = True
        return _say("Theater Screen going down")


class PopcornPopper:
    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return _say("Popcorn Popper on")

    def off(self) -> str:
        self.is_on = False
        return _say("Popcorn Popper off")

    def pop(self) -> str:
        return _say("Popcorn Popper popping popcorn!")


class TheaterLights:
    def __init__(self) -> None:
        self.level = 100

    def dim(self, level: int) -> str:
        self.level = level
        return _say(f"Theater Ceiling Lights dimming to {level}%")

    def on(self) -> str:
        self.level = 100
        return _say("Theater Ceiling Lights on")

    def off(self) -> str:
        self.level = 0
        return _say("Theater Ceiling Lights off")


class HomeTheaterFacade:
    """One-call control over all the home-theater devices."""

    def __init__(
        self,
        amp: Amplifier,
        tuner: Optional[Tuner],
        player: StreamingPlayer,
        projector: Projector,
        lights: TheaterLights,
        screen: Screen,
        popper: PopcornPopper,
    ) -> None:
        self.amp = amp
        self.tuner = tuner
        self.player = player
        self.projector = projector
        self.lights = lights
        self.screen = screen
        self.popper = popper

    def watch_movie(self, movie: str) -> None:
        print("Get ready to watch a movie...")
        self.popper.on()
        self.popper.pop()
        self.lights.dim(10)
        self.screen.down()
        self.projector.on()
        self.projector.wide_screen_mode()
        self.amp.on()
        self.amp.set_streaming_player(self.player)
        self.amp.set_volume(5)
        self.amp.set_surround_sound()
        self.player.on()
        self.player.play(movie)

    def end_movie(self) -> None:
        print("Shutting movie theater down...")
        self.popper.off()
        self.lights.on()
        self.screen.up()
        self.projector.off()
        self.amp.off()
        self.player.stop()
        self.player.off()