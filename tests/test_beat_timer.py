from officebeat.beat import Beat
from officebeat.beat_timer import BEAT_TICKS, SPAWN_SPEED, SPAWN_X, SPAWN_Y, BeatTimer
from officebeat.element import EleType
from officebeat.scene import Scene
from officebeat.settings import InputState


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def at_tick(self, tick):
        self.now = 100.0 + (tick + 0.5) / 60


def _setup():
    clock = FakeClock()
    scene = Scene(1, InputState())
    timer = BeatTimer(clock=clock)
    return clock, scene, timer


def test_spawns_beat_on_listed_tick():
    clock, scene, timer = _setup()
    clock.at_tick(97)
    timer.update(scene)
    beats = scene.label_elements(EleType.BEAT)
    assert timer.count == 97
    assert len(beats) == 1
    beat = beats[0]
    assert isinstance(beat, Beat)
    assert (beat.x, beat.y, beat.v) == (SPAWN_X, SPAWN_Y, SPAWN_SPEED)


def test_same_tick_spawns_only_once():
    clock, scene, timer = _setup()
    clock.at_tick(159)
    timer.update(scene)
    timer.update(scene)
    assert len(scene.label_elements(EleType.BEAT)) == 1
    assert timer.last == 159


def test_other_ticks_spawn_nothing():
    clock, scene, timer = _setup()
    for tick in (0, 1, 96, 98, 500):
        assert tick not in BEAT_TICKS
        clock.at_tick(tick)
        timer.update(scene)
    assert scene.label_elements(EleType.BEAT) == []


def test_every_listed_tick_spawns():
    clock, scene, timer = _setup()
    for tick in sorted(BEAT_TICKS):
        clock.at_tick(tick)
        timer.update(scene)
    assert len(scene.label_elements(EleType.BEAT)) == len(BEAT_TICKS)