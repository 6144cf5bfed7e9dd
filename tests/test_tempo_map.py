from opendaw.tempo_map import TempoMap


def test_defaults():
    tempo_map = TempoMap()
    assert tempo_map.tempo_at(0) == 120.0
    assert tempo_map.tempo_at(100_000) == 120.0
    assert tempo_map.time_signature_at(0) == (4, 4)


def test_tempo_change_applies_from_its_tick():
    tempo_map = TempoMap()
    tempo_map.add_tempo_event(960, 140.0)
    assert tempo_map.tempo_at(959) == 120.0
    assert tempo_map.tempo_at(960) == 140.0
    assert tempo_map.tempo_at(5000) == 140.0


def test_tempo_events_added_out_of_order():
    tempo_map = TempoMap()
    tempo_map.add_tempo_event(2000, 90.0)
    tempo_map.add_tempo_event(1000, 100.0)
    assert tempo_map.tempo_at(1500) == 100.0
    assert tempo_map.tempo_at(2500) == 90.0


def test_later_event_at_same_tick_wins():
    tempo_map = TempoMap()
    tempo_map.add_tempo_event(480, 100.0)
    tempo_map.add_tempo_event(480, 150.0)
    assert tempo_map.tempo_at(480) == 150.0


def test_time_signature_changes():
    tempo_map = TempoMap()
    tempo_map.add_time_signature_event(3840, 3, 4)
    tempo_map.add_time_signature_event(1920, 7, 8)
    assert tempo_map.time_signature_at(1919) == (4, 4)
    assert tempo_map.time_signature_at(1920) == (7, 8)
    assert tempo_map.time_signature_at(4000) == (3, 4)