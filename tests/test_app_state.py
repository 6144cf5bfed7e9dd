from opendaw.app_state import AppState
from opendaw.engine import EngineHandle


def test_default_engine_starts_stopped():
    state = AppState()
    assert state.engine.is_playing is False
    assert state.engine.bpm == 120.0


def test_app_states_have_separate_engines():
    first = AppState()
    second = AppState()
    first.engine.play()
    assert first.engine.is_playing is True
    assert second.engine.is_playing is False


def test_uses_given_engine():
    engine = EngineHandle()
    engine.set_bpm(90.0)
    state = AppState(engine=engine)
    assert state.engine.bpm == 90.0