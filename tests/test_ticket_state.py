import pytest

from ticket_desk.tickets.state import TicketPriority, TicketStatus


def test_status_members_carry_display_metadata():
    assert TicketStatus.OPEN.label == "Open"
    assert TicketStatus.IN_PROGRESS.label == "In Progress"
    assert TicketStatus.IN_PROGRESS.color == "blue"
    assert TicketStatus.RESOLVED.icon == "check_circle"
    assert TicketStatus.CLOSED.color == "grey"


def test_priority_members_carry_display_metadata():
    assert [priority.label for priority in TicketPriority] == ["Low", "Normal", "High", "Urgent"]
    assert TicketPriority.URGENT.color == "red"
    assert TicketPriority.HIGH.icon == "priority_high"


def test_legacy_ordinals_map_to_members():
    assert [TicketStatus.from_ordinal(i) for i in range(4)] == [
        TicketStatus.OPEN,
        TicketStatus.IN_PROGRESS,
        TicketStatus.RESOLVED,
        TicketStatus.CLOSED,
    ]
    assert TicketPriority.from_ordinal(2) is TicketPriority.HIGH


@pytest.mark.parametrize("ordinal", [-1, 4, True])
def test_out_of_range_ordinals_are_rejected(ordinal):
    with pytest.raises(ValueError):
        TicketStatus.from_ordinal(ordinal)
    with pytest.raises(ValueError):
        TicketPriority.from_ordinal(ordinal)
