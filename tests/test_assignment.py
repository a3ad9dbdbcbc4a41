from ticket_desk.tickets.assignment import CollectionSizeRoundRobin, CounterRoundRobin


def test_collection_size_strategy_depends_only_on_size():
    strategy = CollectionSizeRoundRobin()
    assert strategy.next_index(collection_size=5, roster_size=4) == 1
    assert strategy.next_index(collection_size=5, roster_size=4) == 1
    assert strategy.next_index(collection_size=0, roster_size=4) == 0


def test_counter_strategy_advances_on_every_pick():
    strategy = CounterRoundRobin(start=3)
    picks = [strategy.next_index(collection_size=1, roster_size=4) for _ in range(3)]
    assert picks == [3, 0, 1]
    assert strategy.counter == 6
