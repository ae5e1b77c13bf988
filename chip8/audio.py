# Sound buzzer. The core only says whether the tone should be audible; this turns
# that into a looping pyglet tone that starts and stops on the timer transitions.

import pyglet
from pyglet.media import synthesis
from pyglet.media.exceptions import MediaException

from .log import log, logger


def generate_beep(duration=0.1, frequency=440, sample_rate=44100):
    # Use a Square waveform from pyglet.media.synthesis
    wave = synthesis.Square(duration=duration, frequency=frequency, sample_rate=sample_rate)
    return pyglet.media.StaticSource(wave)


class Beeper:

    def __init__(self, frequency=440, volume=0.3):
        self.frequency = frequency
        self.volume = volume
        self.sound_playing = False  # Track if beep is currently playing
        self.player = None
        self.beep_sound = None

    def attach(self, timers):
        timers.add_listener(self.set_tone)
        if timers.tone_active:
            self.set_tone(True)

    def _ensure_player(self):
        if self.player is None:
            self.beep_sound = generate_beep(frequency=self.frequency)
            self.player = pyglet.media.Player()
            self.player.volume = self.volume
            self.player.loop = True
            self.player.queue(self.beep_sound)
        return self.player

    def set_tone(self, active):
        if active == self.sound_playing:
            return
        try:
            player = self._ensure_player()
        except MediaException as e:
            # no audio device: run silent
            logger.warning("Audio disabled: %s", e)
            self.sound_playing = active
            return
        if active:
            player.play()
        else:
            player.pause()
        self.sound_playing = active
        log("Sound", "on" if active else "off")

    def close(self):
        if self.player is not None:
            self.player.pause()
            self.player.delete()
            self.player = None
        self.sound_playing = False
