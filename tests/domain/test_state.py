import pytest

from design_patterns.domain.behavioral.state import Context, CycleState


@pytest.fixture
def context(lines):
    return Context(emit=lines.append)


def test_initial_state_is_a(context):
    assert context.state == CycleState.A


def test_four_requests_cycle_back_to_a(context, lines):
    # Act
    for _ in range(4):
        context.request()

    # Assert
    assert lines == ["State A", "State B", "State C", "State A"]
    assert context.state == CycleState.B


@pytest.mark.parametrize("count", [0, 1, 2, 3, 7, 12])
def test_label_sequence_is_truncated_cycle(lines, count):
    context = Context(emit=lines.append)

    for _ in range(count):
        context.request()

    expected = [f"State {'ABC'[i % 3]}" for i in range(count)]
    assert lines == expected


def test_successor_mapping_is_total_cycle():
    assert CycleState.A.successor == CycleState.B
    assert CycleState.B.successor == CycleState.C
    assert CycleState.C.successor == CycleState.A
    assert {state.successor for state in CycleState} == set(CycleState)


def test_request_starts_from_current_state(lines):
    context = Context(CycleState.C, emit=lines.append)

    context.request()
    context.request()

    assert lines == ["State C", "State A"]


def test_set_state_replaces_current_state(context, lines):
    context.set_state(CycleState.B)

    assert context.state == CycleState.B
    assert lines == []  # setting a state emits nothing


def test_handle_installs_successor(context, lines):
    CycleState.B.handle(context)

    assert context.state == CycleState.C
    assert lines == ["State B"]


def test_transitions_are_logged(context, caplog):
    with caplog.at_level("DEBUG", logger="design_patterns.domain.behavioral.state"):
        context.request()

    assert "State transition A -> B" in caplog.text


def test_default_sink_prints(capsys):
    context = Context()

    context.request()

    assert capsys.readouterr().out == "State A\n"
