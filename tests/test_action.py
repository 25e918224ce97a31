from textual import events

from action import Action, ActionKind


def key(name, character=None):
    return events.Key(name, character)


def test_from_event_backspace():
    assert Action.from_event(key("backspace", "\x08")) == Action.delete()


def test_from_event_char():
    assert Action.from_event(key("a", "a")) == Action(ActionKind.INSERT, "a")


def test_from_event_uppercase_and_punctuation():
    assert Action.from_event(key("A", "A")) == Action.insert("A")
    assert Action.from_event(key("exclamation_mark", "!")) == Action.insert("!")


def test_from_event_space():
    assert Action.from_event(key("space", " ")) == Action.insert(" ")


def test_from_event_escape():
    assert Action.from_event(key("escape", "\x1b")) == Action.escape()


def test_from_event_unsupported_key():
    assert Action.from_event(key("enter", "\r")) is None
    assert Action.from_event(key("tab", "\t")) is None


def test_from_event_navigation_key():
    assert Action.from_event(key("left")) is None
    assert Action.from_event(key("ctrl+a", "\x01")) is None


def test_from_event_non_key_event():
    assert Action.from_event(events.Blur()) is None


def test_constructors():
    assert Action.delete().kind is ActionKind.DELETE
    assert Action.escape().kind is ActionKind.ESCAPE
    insert = Action.insert("z")
    assert insert.kind is ActionKind.INSERT
    assert insert.char == "z"
