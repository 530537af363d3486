"""Sound effects synthesized on the fly."""

import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def _timeline(duration: float) -> np.ndarray:
    return np.arange(int(SAMPLE_RATE * duration)) / SAMPLE_RATE


def _sweep(start_hz: float, end_hz: float, duration: float, decay: float) -> np.ndarray:
    """Sine tone gliding from start_hz to end_hz with an exponential decay."""
    t = _timeline(duration)
    freq = start_hz + (end_hz - start_hz) * t / duration
    phase = 2 * np.pi * np.cumsum(freq) / SAMPLE_RATE
    return np.exp(-t * decay) * np.sin(phase)


def _noise_burst(duration: float, decay: float, rumble_hz: float, rng: np.random.Generator) -> np.ndarray:
    t = _timeline(duration)
    noise = rng.uniform(-1.0, 1.0, t.size)
    rumble = np.sin(2 * np.pi * rumble_hz * t) + np.sin(2 * np.pi * rumble_hz * 0.66 * t)
    return np.exp(-t * decay) * (0.7 * noise + 0.3 * rumble)


class SoundManager:
    """Manages game sound effects."""

    def __init__(self, seed: int = 0):
        self.enabled = True
        self.sounds = {}

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            except pygame.error as e:
                logger.warning("Could not initialize sound mixer: %s", e)
                self.enabled = False
                return

        try:
            self._generate_sounds(np.random.default_rng(seed))
        except (pygame.error, ValueError) as e:
            logger.error("Error generating sounds: %s", e)
            self.enabled = False

    def _generate_sounds(self, rng: np.random.Generator):
        self.sounds['launch'] = self._make_sound(_sweep(900, 300, 0.15, 20), 0.4)
        self.sounds['explosion'] = self._make_sound(_noise_burst(0.4, 5, 60, rng), 0.6)
        self.sounds['city_lost'] = self._make_sound(_sweep(220, 90, 0.6, 4), 0.7)
        self.sounds['bonus_missile'] = self._make_sound(_sweep(880, 1100, 0.05, 30), 0.3)
        self.sounds['bonus_city'] = self._make_sound(
            0.6 * _sweep(523, 523, 0.3, 6) + 0.4 * _sweep(784, 784, 0.3, 6), 0.5
        )
        self.sounds['game_over'] = self._make_sound(_sweep(300, 60, 1.2, 2), 0.7)
        logger.info("Sound effects generated")

    def _make_sound(self, samples: np.ndarray, volume: float) -> pygame.mixer.Sound:
        """Normalize mono samples to 16-bit and build a stereo pygame Sound."""
        peak = np.max(np.abs(samples))
        if peak > 0:
            samples = samples / peak
        mono = (samples * 32767).astype(np.int16)
        _, _, channels = pygame.mixer.get_init()
        if channels > 1:
            data = np.ascontiguousarray(np.repeat(mono[:, None], channels, axis=1))
        else:
            data = mono
        sound = pygame.sndarray.make_sound(data)
        sound.set_volume(volume)
        return sound

    def play(self, sound_name: str):
        if not self.enabled:
            return
        sound = self.sounds.get(sound_name)
        if sound:
            sound.play()

    def play_report(self, report):
        """Play the effects for one engine update report."""
        if report.missiles_launched:
            self.play('launch')
        if report.explosions_created:
            self.play('explosion')
        if report.cities_lost or report.bases_lost:
            self.play('city_lost')

    def toggle_sound(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled
