import json
import logging

from resource_lifecycle.config import OutputConfig, Settings
from resource_lifecycle.counters import LifecycleCounters
from resource_lifecycle.demo import LifecycleDemo


def test_construction_scenario():
    demo = LifecycleDemo(counters=LifecycleCounters())
    result = demo.run_construction_scenario()
    assert result == {"constructed": 1, "destructed_in_scope": 0, "destructed_after_scope": 1}


def test_move_scenario():
    demo = LifecycleDemo(counters=LifecycleCounters())
    result = demo.run_move_scenario()
    assert result["r2_name"] == "texture2"
    assert result["r1_name"] == ""
    assert result["constructed_before_move"] == 1
    assert result["constructed_after_move"] == 1
    assert result["destructed_after_scope"] == 2


def test_run_uses_process_counters_by_default(fresh_counters):
    results = LifecycleDemo().run()
    assert results["construction"]["destructed_after_scope"] == 1
    assert results["move"]["constructed_after_move"] == 1
    # второй сценарий сбрасывает счётчики перед стартом
    assert fresh_counters.constructed == 1
    assert fresh_counters.destructed == 2


def test_trace_lines(caplog):
    caplog.set_level(logging.INFO, logger="resource_lifecycle")
    LifecycleDemo(counters=LifecycleCounters()).run()
    messages = [rec.getMessage() for rec in caplog.records]

    assert "=== Test 1: Construction ===" in messages
    assert "Constructions: 1" in messages
    assert "After destruction - Destructions: 1" in messages
    assert "r2 name: texture2" in messages
    assert "r1 name: " in messages
    assert "Constructions after move: 1" in messages


def test_export(tmp_path):
    out = tmp_path / "trace.json"
    settings = Settings(output=OutputConfig(path=str(out)))
    LifecycleDemo(settings, counters=LifecycleCounters()).run()

    data = json.loads(out.read_text(encoding="utf-8"))
    kinds = [e["event"] for e in data["events"]]
    assert kinds == ["construct", "destroy", "construct", "move_construct", "destroy", "destroy"]


def test_configured_scenarios(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "identity:\n  algorithm: blake2b\n"
        "demo:\n  move:\n    name: mesh\n    size: 0\n",
        encoding="utf-8",
    )
    result = LifecycleDemo(Settings.load(str(path)), counters=LifecycleCounters()).run_move_scenario()
    assert result["r2_name"] == "mesh"
