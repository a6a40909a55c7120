from unicode_editor.models import (
    CharacterNode,
    CharKind,
    ListMode,
    ListType,
    SessionState,
    StyleAxis,
    TextSpan,
)


def test_style_axis_members():
    assert list(StyleAxis) == [StyleAxis.BOLD, StyleAxis.ITALIC]
    assert StyleAxis("bold") is StyleAxis.BOLD


def test_list_type_values():
    assert [member.value for member in ListType] == ["bullets", "numbers"]


def test_session_state_defaults():
    state = SessionState()

    assert state.list_mode is ListMode.NONE
    assert state.next_number == 1


def test_character_node_defaults():
    node = CharacterNode(kind=CharKind.OTHER, raw="!")

    assert node.index is None
    assert node.bold is False
    assert node.italic is False


def test_text_span_is_empty():
    assert TextSpan(3, 3).is_empty
    assert not TextSpan(3, 4).is_empty
