from infspark.pipeline import MAX_SUGGESTIONS, generate_suggestions, matching_rules


def _tools(*types: str) -> list:
    return [{"id": f"t{index}", "type": type_, "title": type_} for index, type_ in enumerate(types)]


def test_world_matching_every_rule_gets_first_three(make_world) -> None:
    world = make_world(
        tools=_tools("video-player", "dashboard"),
        pages=[],
        worldArchetype=None,
        value=500,
    )

    assert matching_rules(world) == [
        "add-more-tools",
        "create-pages",
        "try-slot-machine",
        "add-gallery",
        "add-charts",
        "raise-value",
    ]
    assert generate_suggestions(world) == [
        "Add more interactive tools to Crystal Caves",
        "Create additional pages for Crystal Caves",
        "Try creating a world using the slot machine",
    ]


def test_bare_world_stops_at_the_cap(make_world) -> None:
    world = make_world(tools=[], pages=[], worldArchetype=None, value=500)

    suggestions = generate_suggestions(world)

    assert len(suggestions) == MAX_SUGGESTIONS
    assert suggestions == [
        "Add more interactive tools to Crystal Caves",
        "Create additional pages for Crystal Caves",
        "Try creating a world using the slot machine",
    ]


def test_later_rules_fill_free_slots(make_world) -> None:
    world = make_world(
        tools=_tools("video-player", "dashboard", "chart"),
        pages=[{"title": "About"}],
        worldArchetype="Explorer",
        value=100,
    )

    assert generate_suggestions(world) == [
        "Add a gallery to complement your video content",
        "Add charts to visualize your dashboard metrics",
        "Increase world value by adding unique tools",
    ]


def test_complete_world_gets_no_suggestions(make_world) -> None:
    world = make_world(
        tools=_tools("chart", "gallery", "timeline"),
        pages=[{"title": "About"}],
        worldArchetype="Explorer",
        value=5000,
    )

    assert generate_suggestions(world) == []
    assert matching_rules(world) == []


def test_value_threshold_is_exclusive(make_world) -> None:
    base = dict(tools=_tools("chart", "gallery", "timeline"), pages=[{"title": "About"}])

    assert "raise-value" in matching_rules(make_world(value=1999, **base))
    assert "raise-value" not in matching_rules(make_world(value=2000, **base))


def test_page_tools_do_not_count_toward_tool_rules(make_world) -> None:
    world = make_world(
        tools=_tools("chart", "gallery", "timeline"),
        pages=[{"title": "Media", "tools": _tools("video-player")}],
    )

    assert "add-gallery" not in matching_rules(world)


def test_custom_limit(make_world) -> None:
    world = make_world(tools=[], pages=[], worldArchetype=None, value=0)

    assert len(generate_suggestions(world, limit=1)) == 1
    assert generate_suggestions(world, limit=0) == []
