from minex3.asset_tracking import ResourceHandles


def test_empty_tracker_is_done():
    handles = ResourceHandles()
    assert handles.is_all_done()
    assert handles.poll(lambda path: False) == []


def test_resource_waits_for_dependencies():
    loaded = set()
    handles = ResourceHandles()
    handles.load_resource("level", ["audio/music/Fluffing A Duck.ogg"], lambda: {"music": 1})
    assert not handles.is_all_done()
    assert handles.poll(loaded.__contains__) == []
    assert handles.get("level") is None
    assert "level" not in handles

    loaded.add("audio/music/Fluffing A Duck.ogg")
    assert handles.poll(loaded.__contains__) == ["level"]
    assert handles.get("level") == {"music": 1}
    assert "level" in handles
    assert handles.is_all_done()


def test_all_dependencies_required():
    loaded = {"a.png"}
    handles = ResourceHandles()
    handles.load_resource("ship", ["a.png", "b.png"], lambda: "ship")
    assert handles.poll(loaded.__contains__) == []
    loaded.add("b.png")
    assert handles.poll(loaded.__contains__) == ["ship"]


def test_order_kept_and_build_called_once():
    calls = []
    loaded = {"x"}
    handles = ResourceHandles()
    handles.load_resource("first", ["x"], lambda: calls.append("first") or "f")
    handles.load_resource("blocked", ["y"], lambda: calls.append("blocked") or "b")
    handles.load_resource("second", [], lambda: calls.append("second") or "s")

    assert handles.poll(loaded.__contains__) == ["first", "second"]
    assert handles.poll(loaded.__contains__) == []
    assert calls == ["first", "second"]
    assert handles.finished == ("first", "second")
    assert not handles.is_all_done()


def test_load_resource_chains():
    handles = ResourceHandles()
    result = handles.load_resource("a", [], lambda: 1).load_resource("b", [], lambda: 2)
    assert result is handles
    assert handles.poll(lambda path: True) == ["a", "b"]