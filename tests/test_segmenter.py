from task_engine.segmenter import split_fragments


def test_split_on_and():
    assert split_fragments("Zed concert at 4pm tomorrow and Noc2 concert at 6pm Friday") == [
        "Zed concert at 4pm tomorrow",
        "Noc2 concert at 6pm Friday",
    ]


def test_split_on_commas():
    assert split_fragments("Buy milk, pick up kids, call dentist") == ["Buy milk", "pick up kids", "call dentist"]


def test_split_on_then_and_semicolon():
    assert split_fragments("wash the car then walk the dog; water plants") == [
        "wash the car",
        "walk the dog",
        "water plants",
    ]


def test_and_with_lead_in_phrase_is_consumed():
    assert split_fragments("email Sarah and I need to book flights") == ["email Sarah", "book flights"]
    assert split_fragments("email Sarah, I have dentist at 3pm") == ["email Sarah", "dentist at 3pm"]


def test_and_inside_words_is_not_a_separator():
    assert split_fragments("buy sandwich for Andrew") == ["buy sandwich for Andrew"]


def test_short_fragments_dropped_unless_temporal():
    assert split_fragments("call mom and eat") == ["call mom"]
    assert split_fragments("gym, 5pm") == ["5pm"]


def test_lone_separator_yields_no_empty_fragment():
    assert split_fragments("and call mom") == ["call mom"]
    assert split_fragments("call mom,") == ["call mom"]


def test_falls_back_to_whole_input():
    assert split_fragments("  eat  ") == ["eat"]
    assert split_fragments("a and b") == ["a and b"]


def test_fragments_preserve_input_order():
    text = "first task here, second task here and third task here"
    fragments = split_fragments(text)
    positions = [text.index(fragment) for fragment in fragments]
    assert positions == sorted(positions)
    assert len(fragments) == 3
